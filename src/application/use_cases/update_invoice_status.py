"""Update Invoice Status Use Case."""

from dataclasses import dataclass

from src.application.dto.responses import InvoiceStatusResponse
from src.application.use_cases.get_invoice import is_visible
from src.config import get_logger
from src.core.entities import CallerContext, InvoiceStatus
from src.core.exceptions import InvoiceNotFoundError
from src.core.interfaces import IInvoiceStore

logger = get_logger(__name__)


@dataclass
class StatusChangeResult:
    """Outcome of a status change."""

    invoice_id: int
    previous_status: InvoiceStatus
    status: InvoiceStatus


class UpdateInvoiceStatusUseCase:
    """
    Move an invoice to another status.

    Concurrent changes are last-write-wins; the transition table is checked
    against the status read just before the write.
    """

    def __init__(self, invoice_store: IInvoiceStore | None = None):
        self._invoice_store = invoice_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from src.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def execute(
        self,
        invoice_id: int,
        status: InvoiceStatus,
        caller: CallerContext,
    ) -> StatusChangeResult:
        store = await self._get_invoice_store()
        invoice = await store.get_invoice(invoice_id)
        if invoice is None or not is_visible(invoice, caller):
            raise InvoiceNotFoundError(invoice_id)

        previous = invoice.change_status(status)
        if not await store.update_status(invoice_id, invoice.status):
            raise InvoiceNotFoundError(invoice_id)

        logger.info(
            "invoice_status_changed",
            invoice_id=invoice_id,
            previous=previous.value,
            status=invoice.status.value,
            caller=caller.user_id,
        )
        return StatusChangeResult(
            invoice_id=invoice_id,
            previous_status=previous,
            status=invoice.status,
        )

    @staticmethod
    def to_response(result: StatusChangeResult) -> InvoiceStatusResponse:
        return InvoiceStatusResponse(
            invoice_id=result.invoice_id,
            previous_status=result.previous_status.value,
            status=result.status.value,
        )
