"""Create Invoice Use Case: validate, price, then persist header and items."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.dto.requests import CreateInvoiceRequest
from src.application.dto.responses import InvoiceResponse
from src.application.use_cases.get_invoice import invoice_to_response
from src.config import get_logger, get_settings
from src.core.entities import CallerContext, Invoice, InvoiceLineItem, InvoiceStatus
from src.core.exceptions import InvoiceItemsWriteError, ValidationError
from src.core.interfaces import ICustomerStore, IInvoiceStore
from src.core.pricing import ZERO, clamp_tax_rate, fits_cents

logger = get_logger(__name__)


@dataclass
class CreateInvoiceResult:
    """Result of creating an invoice."""

    invoice: Invoice


class CreateInvoiceUseCase:
    """
    Create a sale or purchase invoice owned by the caller.

    Flow:
    1. Validate the draft; nothing is written if it fails
    2. Price the lines and total the invoice
    3. Write the header (assigns id and number)
    4. Write the items; on failure flag the header and raise
    """

    def __init__(
        self,
        invoice_store: IInvoiceStore | None = None,
        customer_store: ICustomerStore | None = None,
    ):
        self._invoice_store = invoice_store
        self._customer_store = customer_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from src.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def _get_customer_store(self) -> ICustomerStore:
        if self._customer_store is None:
            from src.infrastructure.storage.sqlite import get_customer_store

            self._customer_store = await get_customer_store()
        return self._customer_store

    async def execute(
        self,
        request: CreateInvoiceRequest,
        caller: CallerContext,
    ) -> CreateInvoiceResult:
        """Execute create invoice use case."""
        logger.info(
            "create_invoice_started",
            invoice_type=request.invoice_type.value,
            items=len(request.items),
            owner_id=caller.user_id,
        )

        invoice = await self._build_draft(request, caller)

        store = await self._get_invoice_store()
        items = invoice.items
        invoice = await store.create_invoice(invoice)

        try:
            invoice.items = await store.create_line_items(invoice.id, items)  # type: ignore[arg-type]
        except Exception as e:
            await self._flag_orphan(store, invoice, str(e))
            raise InvoiceItemsWriteError(invoice.id, invoice.invoice_number, str(e)) from e  # type: ignore[arg-type]

        logger.info(
            "create_invoice_complete",
            invoice_id=invoice.id,
            invoice_number=invoice.invoice_number,
            total=str(invoice.total_amount),
        )
        return CreateInvoiceResult(invoice=invoice)

    async def _build_draft(
        self,
        request: CreateInvoiceRequest,
        caller: CallerContext,
    ) -> Invoice:
        if not caller.user_id:
            raise ValidationError("owner_id", "an owner is required")
        if not request.items:
            raise ValidationError("items", "at least one line item is required")

        items: list[InvoiceLineItem] = []
        for index, line in enumerate(request.items):
            description = line.description.strip()
            if not description:
                raise ValidationError(f"items[{index}].description", "must not be empty")
            if line.unit_price <= ZERO:
                raise ValidationError(
                    f"items[{index}].unit_price", "must be greater than zero", line.unit_price
                )
            if line.quantity <= ZERO:
                raise ValidationError(
                    f"items[{index}].quantity", "must be greater than zero", line.quantity
                )
            item = InvoiceLineItem(
                position=index,
                description=description,
                quantity=line.quantity,
                unit_price=line.unit_price,
            )
            if not fits_cents(item.extended_price):
                raise ValidationError(
                    f"items[{index}]", "amount is too large", str(item.extended_price)
                )
            items.append(item)

        if request.customer_id is not None:
            customers = await self._get_customer_store()
            if await customers.get_customer(request.customer_id) is None:
                raise ValidationError(
                    "customer_id", "customer does not exist", request.customer_id
                )

        settings = get_settings().invoice
        draft = Invoice(
            invoice_type=request.invoice_type,
            customer_id=request.customer_id,
            owner_id=caller.user_id,
            tax_rate=tax_rate_or_default(request.tax_rate),
            status=InvoiceStatus(settings.initial_status),
            notes=request.notes,
            items=items,
        )
        if not fits_cents(draft.total_amount):
            raise ValidationError("items", "invoice total is too large", str(draft.total_amount))
        if request.invoice_date is not None:
            draft.invoice_date = request.invoice_date
        return draft

    @staticmethod
    async def _flag_orphan(store: IInvoiceStore, invoice: Invoice, reason: str) -> None:
        logger.error(
            "invoice_items_write_failed",
            invoice_id=invoice.id,
            invoice_number=invoice.invoice_number,
            error=reason,
        )
        invoice.is_incomplete = True
        try:
            await store.mark_incomplete(invoice.id)  # type: ignore[arg-type]
        except Exception as e:
            logger.error("invoice_flag_failed", invoice_id=invoice.id, error=str(e))

    @staticmethod
    def to_response(result: CreateInvoiceResult) -> InvoiceResponse:
        """Convert result to API response."""
        return invoice_to_response(result.invoice)


def tax_rate_or_default(value: Decimal | None) -> Decimal:
    """Clamped tax rate, falling back to the configured default."""
    if value is None:
        return clamp_tax_rate(get_settings().invoice.default_tax_rate)
    return clamp_tax_rate(value)
