"""Tests for report period resolution."""

from datetime import date

from src.core.entities import ReportPeriod
from src.core.services import month_end, resolve_window, shift_months

TODAY = date(2026, 2, 14)


class TestResolveWindow:
    def test_month(self):
        window = resolve_window(ReportPeriod.MONTH, today=TODAY)
        assert window.start == date(2026, 2, 1)
        assert window.end == date(2026, 2, 28)

    def test_quarter_spans_three_months(self):
        window = resolve_window(ReportPeriod.QUARTER, today=TODAY)
        assert window.start == date(2025, 12, 1)
        assert window.end == date(2026, 2, 28)

    def test_year(self):
        window = resolve_window(ReportPeriod.YEAR, today=TODAY)
        assert window.start == date(2026, 1, 1)
        assert window.end == date(2026, 12, 31)

    def test_custom(self):
        window = resolve_window(
            ReportPeriod.CUSTOM, today=TODAY, start=date(2025, 6, 1), end=date(2025, 6, 30)
        )
        assert (window.start, window.end) == (date(2025, 6, 1), date(2025, 6, 30))

    def test_custom_without_bounds_falls_back_to_month(self):
        window = resolve_window(ReportPeriod.CUSTOM, today=TODAY)
        assert window.start == date(2026, 2, 1)
        assert window.end == date(2026, 2, 28)

    def test_custom_inverted_kept_and_empty(self):
        window = resolve_window(
            ReportPeriod.CUSTOM, today=TODAY, start=date(2026, 3, 1), end=date(2026, 1, 1)
        )
        assert window.is_empty


def test_month_end_leap_year():
    assert month_end(date(2024, 2, 10)) == date(2024, 2, 29)


def test_shift_months_across_year():
    assert shift_months(date(2026, 1, 20), -1) == date(2025, 12, 1)
    assert shift_months(date(2025, 11, 3), 3) == date(2026, 2, 1)
