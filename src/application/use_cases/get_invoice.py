"""Get Invoice Use Case and the invoice response mapping shared by the invoice use cases."""

from src.application.dto.responses import InvoiceResponse, LineItemResponse
from src.config import get_logger
from src.core.entities import CallerContext, Invoice
from src.core.exceptions import InvoiceNotFoundError
from src.core.interfaces import IInvoiceStore
from src.core.pricing import quantize_money

logger = get_logger(__name__)


def is_visible(invoice: Invoice, caller: CallerContext) -> bool:
    """Admins see everything; accountants see their own invoices."""
    return caller.is_privileged or invoice.owner_id == caller.user_id


def invoice_to_response(invoice: Invoice) -> InvoiceResponse:
    """Map an invoice entity to its API shape, rounding money to cents."""
    return InvoiceResponse(
        id=invoice.id or 0,
        invoice_number=invoice.invoice_number,
        invoice_type=invoice.invoice_type.value,
        status=invoice.status.value,
        customer_id=invoice.customer_id,
        customer_name=invoice.customer.name if invoice.customer else None,
        owner_id=invoice.owner_id,
        invoice_date=invoice.invoice_date,
        tax_rate=invoice.tax_rate,
        subtotal=quantize_money(invoice.subtotal),
        tax_amount=quantize_money(invoice.tax_amount),
        total_amount=quantize_money(invoice.total_amount),
        notes=invoice.notes,
        is_incomplete=invoice.is_incomplete,
        items=[
            LineItemResponse(
                id=item.id,
                position=item.position,
                description=item.description,
                quantity=item.quantity,
                unit_price=quantize_money(item.unit_price),
                extended_price=quantize_money(item.extended_price),
            )
            for item in invoice.items
        ],
        created_at=invoice.created_at,
        updated_at=invoice.updated_at,
    )


class GetInvoiceUseCase:
    """Load one invoice with its items, honouring owner visibility."""

    def __init__(self, invoice_store: IInvoiceStore | None = None):
        self._invoice_store = invoice_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from src.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def execute(self, invoice_id: int, caller: CallerContext) -> Invoice:
        """
        Get an invoice.

        Raises:
            InvoiceNotFoundError: If it does not exist or belongs to another
                accountant and the caller is not an admin.
        """
        store = await self._get_invoice_store()
        invoice = await store.get_invoice(invoice_id)
        if invoice is None or not is_visible(invoice, caller):
            if invoice is not None:
                logger.warning(
                    "invoice_access_hidden",
                    invoice_id=invoice_id,
                    caller=caller.user_id,
                )
            raise InvoiceNotFoundError(invoice_id)
        return invoice

    @staticmethod
    def to_response(invoice: Invoice) -> InvoiceResponse:
        return invoice_to_response(invoice)
