"""
Report aggregation service.

Rolls a window of invoices up into headline totals, per-accountant totals
and chronologically ordered monthly buckets. The caller is responsible for
scoping the invoices to what the requester may see before calling in.
"""

from collections.abc import Iterable
from datetime import date, datetime

from src.config import get_logger
from src.core.entities.invoice import Invoice, InvoiceType
from src.core.entities.report import (
    DashboardStats,
    MonthBucket,
    PartyTotals,
    ReportSummary,
    ReportWindow,
    TypeFilter,
)

logger = get_logger(__name__)


def _as_day(value: object) -> date | None:
    """Truncate to a calendar day; anything else is treated as missing."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


def _matches_type(invoice: Invoice, type_filter: TypeFilter) -> bool:
    if type_filter == TypeFilter.ALL:
        return True
    return invoice.invoice_type.value == type_filter.value


class ReportAggregator:
    """Aggregates invoices into report summaries."""

    def aggregate(
        self,
        invoices: Iterable[Invoice],
        window: ReportWindow,
        type_filter: TypeFilter = TypeFilter.ALL,
    ) -> ReportSummary:
        """
        Build a report summary.

        Invoices outside the window or of another type are dropped. An
        invoice without a date, or without an owner, still counts in the
        headline totals but is left out of the grouping it cannot be
        placed in.
        """
        summary = ReportSummary(window=window, type_filter=type_filter)
        if window.is_empty:
            return summary

        by_accountant: dict[str, PartyTotals] = {}
        months: dict[tuple[int, int], MonthBucket] = {}
        skipped_dates = 0
        skipped_owners = 0

        for invoice in invoices:
            if not _matches_type(invoice, type_filter):
                continue

            day = _as_day(invoice.invoice_date)
            if day is not None and not window.contains(day):
                continue

            is_sale = invoice.invoice_type == InvoiceType.SALE
            amount = invoice.total_amount

            summary.invoice_count += 1
            if is_sale:
                summary.total_sales += amount
            else:
                summary.total_purchases += amount

            if invoice.owner_id:
                party = by_accountant.setdefault(invoice.owner_id, PartyTotals())
                if is_sale:
                    party.sales += amount
                else:
                    party.purchases += amount
            else:
                skipped_owners += 1

            if day is not None:
                bucket = months.get((day.year, day.month))
                if bucket is None:
                    bucket = MonthBucket(year=day.year, month=day.month)
                    months[(day.year, day.month)] = bucket
                if is_sale:
                    bucket.sales += amount
                else:
                    bucket.purchases += amount
            else:
                skipped_dates += 1

        if skipped_dates or skipped_owners:
            logger.warning(
                "report_anomalies_excluded_from_groups",
                missing_date=skipped_dates,
                missing_owner=skipped_owners,
            )

        summary.by_accountant = by_accountant
        summary.by_month = sorted(months.values(), key=lambda b: (b.year, b.month))
        return summary

    def summarize(
        self,
        invoices: Iterable[Invoice],
        accountant_count: int = 0,
    ) -> DashboardStats:
        """Headline totals over every invoice given, without a window."""
        stats = DashboardStats(accountant_count=accountant_count)
        for invoice in invoices:
            stats.invoice_count += 1
            if invoice.invoice_type == InvoiceType.SALE:
                stats.total_sales += invoice.total_amount
            else:
                stats.total_purchases += invoice.total_amount
        return stats
