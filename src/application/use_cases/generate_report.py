"""
Generate Report Use Case.

Resolves the window, loads the invoices the caller may see, aggregates them
and resolves accountant display names for presentation.
"""

from dataclasses import dataclass, field
from datetime import date

from src.application.dto.requests import ReportRequest
from src.application.dto.responses import (
    AccountantTotalsResponse,
    MonthTotalsResponse,
    ReportResponse,
)
from src.config import get_logger, get_settings
from src.core.entities import (
    CallerContext,
    InvoiceFilter,
    InvoiceType,
    ReportPeriod,
    ReportSummary,
    TypeFilter,
)
from src.core.interfaces import IAccountantStore, IInvoiceStore
from src.core.pricing import quantize_money
from src.core.services import ReportAggregator, resolve_window

logger = get_logger(__name__)


@dataclass
class ReportResult:
    """A report summary plus the names needed to display it."""

    period: ReportPeriod
    summary: ReportSummary
    accountant_names: dict[str, str] = field(default_factory=dict)


class GenerateReportUseCase:
    """Build a financial report for the caller."""

    def __init__(
        self,
        invoice_store: IInvoiceStore | None = None,
        accountant_store: IAccountantStore | None = None,
        aggregator: ReportAggregator | None = None,
    ):
        self._invoice_store = invoice_store
        self._accountant_store = accountant_store
        self._aggregator = aggregator or ReportAggregator()

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

    async def execute(
        self,
        request: ReportRequest,
        caller: CallerContext,
        today: date | None = None,
    ) -> ReportResult:
        window = resolve_window(request.period, today=today, start=request.start, end=request.end)
        logger.info(
            "generate_report_started",
            period=request.period.value,
            start=window.start.isoformat(),
            end=window.end.isoformat(),
            type_filter=request.type_filter.value,
            caller=caller.user_id,
        )

        if window.is_empty:
            return ReportResult(
                period=request.period,
                summary=self._aggregator.aggregate([], window, request.type_filter),
            )

        invoice_type = (
            None if request.type_filter == TypeFilter.ALL else InvoiceType(request.type_filter.value)
        )
        store = await self._get_invoice_store()
        # Owner and window scoping happen in the query, before aggregation.
        invoices = await store.list_invoices(
            InvoiceFilter(
                owner_id=caller.owner_filter,
                invoice_type=invoice_type,
                start_date=window.start,
                end_date=window.end,
                include_undated=True,
            )
        )

        summary = self._aggregator.aggregate(invoices, window, request.type_filter)
        names = await self._resolve_names(list(summary.by_accountant))

        logger.info(
            "generate_report_complete",
            invoice_count=summary.invoice_count,
            months=len(summary.by_month),
            accountants=len(summary.by_accountant),
        )
        return ReportResult(period=request.period, summary=summary, accountant_names=names)

    async def _resolve_names(self, user_ids: list[str]) -> dict[str, str]:
        if not user_ids:
            return {}
        fallback = get_settings().report.unknown_accountant_label
        accountants = await self._get_accountant_store()
        known = {p.user_id: p.full_name for p in await accountants.list_profiles()}
        return {user_id: known.get(user_id, fallback) for user_id in user_ids}

    @staticmethod
    def to_response(result: ReportResult) -> ReportResponse:
        """Convert result to API response."""
        summary = result.summary
        month_format = get_settings().report.month_label_format
        return ReportResponse(
            period=result.period.value,
            start=summary.window.start,
            end=summary.window.end,
            type_filter=summary.type_filter.value,
            total_sales=quantize_money(summary.total_sales),
            total_purchases=quantize_money(summary.total_purchases),
            net_profit=quantize_money(summary.net_profit),
            invoice_count=summary.invoice_count,
            by_accountant=[
                AccountantTotalsResponse(
                    user_id=user_id,
                    name=result.accountant_names.get(user_id, user_id),
                    sales=quantize_money(totals.sales),
                    purchases=quantize_money(totals.purchases),
                    net=quantize_money(totals.net),
                )
                for user_id, totals in summary.by_accountant.items()
            ],
            by_month=[
                MonthTotalsResponse(
                    month=bucket.key,
                    label=bucket.label(month_format),
                    sales=quantize_money(bucket.sales),
                    purchases=quantize_money(bucket.purchases),
                    net=quantize_money(bucket.sales - bucket.purchases),
                )
                for bucket in summary.by_month
            ],
        )
