"""Get Dashboard Stats Use Case."""

from src.application.dto.responses import DashboardStatsResponse
from src.core.entities import CallerContext, DashboardStats, InvoiceFilter, Role
from src.core.interfaces import IAccountantStore, IInvoiceStore
from src.core.pricing import quantize_money
from src.core.services import ReportAggregator


class GetDashboardStatsUseCase:
    """Headline totals over every invoice the caller may see."""

    def __init__(
        self,
        invoice_store: IInvoiceStore | None = None,
        accountant_store: IAccountantStore | None = None,
    ):
        self._invoice_store = invoice_store
        self._accountant_store = accountant_store
        self._aggregator = ReportAggregator()

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from src.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def _get_accountant_store(self) -> IAccountantStore:
        if self._accountant_store is None:
            from src.infrastructure.storage.sqlite import get_accountant_store

            self._accountant_store = await get_accountant_store()
        return self._accountant_store

    async def execute(self, caller: CallerContext) -> DashboardStats:
        invoices = await (await self._get_invoice_store()).list_invoices(
            InvoiceFilter(owner_id=caller.owner_filter)
        )
        accountant_count = await (await self._get_accountant_store()).count_profiles(
            Role.ACCOUNTANT
        )
        return self._aggregator.summarize(invoices, accountant_count=accountant_count)

    @staticmethod
    def to_response(stats: DashboardStats) -> DashboardStatsResponse:
        return DashboardStatsResponse(
            total_sales=quantize_money(stats.total_sales),
            total_purchases=quantize_money(stats.total_purchases),
            net_profit=quantize_money(stats.total_sales - stats.total_purchases),
            invoice_count=stats.invoice_count,
            accountant_count=stats.accountant_count,
        )
