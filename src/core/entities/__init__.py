"""Core domain entities."""

from src.core.entities.accountant import (
    AccountantProfile,
    AccountantWithTotals,
    CallerContext,
    Role,
)
from src.core.entities.customer import Customer
from src.core.entities.invoice import (
    STATUS_TRANSITIONS,
    Invoice,
    InvoiceFilter,
    InvoiceLineItem,
    InvoiceStatus,
    InvoiceType,
    can_transition,
)
from src.core.entities.report import (
    DashboardStats,
    MonthBucket,
    PartyTotals,
    ReportPeriod,
    ReportSummary,
    ReportWindow,
    TypeFilter,
)

__all__ = [
    # Invoice
    "Invoice",
    "InvoiceLineItem",
    "InvoiceFilter",
    "InvoiceStatus",
    "InvoiceType",
    "STATUS_TRANSITIONS",
    "can_transition",
    # Parties
    "Customer",
    "AccountantProfile",
    "AccountantWithTotals",
    "CallerContext",
    "Role",
    # Reporting
    "DashboardStats",
    "MonthBucket",
    "PartyTotals",
    "ReportPeriod",
    "ReportSummary",
    "ReportWindow",
    "TypeFilter",
]
