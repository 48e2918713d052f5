"""List Invoices Use Case."""

from src.application.dto.responses import InvoiceListResponse
from src.application.use_cases.get_invoice import invoice_to_response
from src.core.entities import CallerContext, Invoice, InvoiceFilter, InvoiceType
from src.core.interfaces import IInvoiceStore


class ListInvoicesUseCase:
    """List invoice headers newest first, pre-filtered to what the caller may see."""

    def __init__(self, invoice_store: IInvoiceStore | None = None):
        self._invoice_store = invoice_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from src.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def execute(
        self,
        caller: CallerContext,
        invoice_type: InvoiceType | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invoice]:
        store = await self._get_invoice_store()
        return await store.list_invoices(
            InvoiceFilter(
                owner_id=caller.owner_filter,
                invoice_type=invoice_type,
                limit=limit,
                offset=offset,
            )
        )

    @staticmethod
    def to_response(invoices: list[Invoice], limit: int, offset: int) -> InvoiceListResponse:
        return InvoiceListResponse(
            invoices=[invoice_to_response(inv) for inv in invoices],
            count=len(invoices),
            limit=limit,
            offset=offset,
        )
