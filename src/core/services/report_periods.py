"""Resolution of named report periods into date windows."""

import calendar
from datetime import date

from src.core.entities.report import ReportPeriod, ReportWindow


def month_start(day: date) -> date:
    return day.replace(day=1)


def month_end(day: date) -> date:
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=last)


def shift_months(day: date, months: int) -> date:
    """First day of the month ``months`` away from ``day`` (negative = back)."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def resolve_window(
    period: ReportPeriod,
    today: date | None = None,
    start: date | None = None,
    end: date | None = None,
) -> ReportWindow:
    """
    Turn a period preset into an inclusive window.

    Args:
        period: Preset to resolve.
        today: Reference day (defaults to the current date).
        start: Custom window start; falls back to the current month start.
        end: Custom window end; falls back to the current month end.

    Returns:
        The resolved window. A custom window with ``start > end`` is returned
        as is and aggregates to nothing.
    """
    today = today or date.today()

    if period == ReportPeriod.QUARTER:
        return ReportWindow(start=shift_months(today, -2), end=month_end(today))
    if period == ReportPeriod.YEAR:
        return ReportWindow(start=date(today.year, 1, 1), end=date(today.year, 12, 31))
    if period == ReportPeriod.CUSTOM:
        return ReportWindow(
            start=start or month_start(today),
            end=end or month_end(today),
        )
    return ReportWindow(start=month_start(today), end=month_end(today))
