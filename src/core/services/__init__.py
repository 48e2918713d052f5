"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/pricing.py
- src/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from src.core.services.invoice_numbering import InvoiceNumberGenerator
from src.core.services.report_aggregator import ReportAggregator
from src.core.services.report_periods import (
    month_end,
    month_start,
    resolve_window,
    shift_months,
)

__all__ = [
    # Invoice numbering
    "InvoiceNumberGenerator",
    # Reporting
    "ReportAggregator",
    "resolve_window",
    "month_start",
    "month_end",
    "shift_months",
]
