"""Reporting domain entities."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, computed_field

from src.core.pricing import ZERO


class ReportPeriod(str, Enum):
    """Named date-window presets."""

    MONTH = "month"  # current month
    QUARTER = "quarter"  # last three months including the current one
    YEAR = "year"  # current calendar year
    CUSTOM = "custom"


class TypeFilter(str, Enum):
    """Invoice types included in a report."""

    SALE = "sale"
    PURCHASE = "purchase"
    ALL = "all"


@dataclass(frozen=True)
class ReportWindow:
    """Inclusive date range compared at day granularity."""

    start: date
    end: date

    @property
    def is_empty(self) -> bool:
        return self.start > self.end

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


class PartyTotals(BaseModel):
    """Sales and purchases attributed to one group."""

    sales: Decimal = ZERO
    purchases: Decimal = ZERO

    @computed_field  # type: ignore[prop-decorator]
    @property
    def net(self) -> Decimal:
        return self.sales - self.purchases


class MonthBucket(BaseModel):
    """Sales and purchases for one calendar month."""

    year: int
    month: int
    sales: Decimal = ZERO
    purchases: Decimal = ZERO

    @property
    def key(self) -> str:
        """Sortable ``YYYY-MM`` key."""
        return f"{self.year:04d}-{self.month:02d}"

    def label(self, fmt: str = "%b %Y") -> str:
        """Human label such as ``Jan 2026``."""
        return date(self.year, self.month, 1).strftime(fmt)


class ReportSummary(BaseModel):
    """Aggregated view of the invoices in a report window."""

    window: ReportWindow
    type_filter: TypeFilter = TypeFilter.ALL
    total_sales: Decimal = ZERO
    total_purchases: Decimal = ZERO
    invoice_count: int = 0
    by_accountant: dict[str, PartyTotals] = Field(default_factory=dict)
    by_month: list[MonthBucket] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def net_profit(self) -> Decimal:
        return self.total_sales - self.total_purchases


class DashboardStats(BaseModel):
    """Headline figures over every invoice visible to the caller."""

    total_sales: Decimal = ZERO
    total_purchases: Decimal = ZERO
    invoice_count: int = 0
    accountant_count: int = 0
