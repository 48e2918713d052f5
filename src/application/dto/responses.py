"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization. Money fields are
Decimals already rounded to cents, so they serialize as strings such as
``"264.50"``.
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class LineItemResponse(BaseModel):
    """Line item in an invoice response."""

    id: int | None = None
    position: int = Field(..., description="Display order within the invoice")
    description: str
    quantity: Decimal
    unit_price: Decimal
    extended_price: Decimal = Field(..., description="quantity * unit_price")


class InvoiceResponse(BaseModel):
    """Invoice header, with items when loaded."""

    id: int
    invoice_number: str
    invoice_type: str
    status: str
    customer_id: int | None = None
    customer_name: str | None = None
    owner_id: str | None = None
    invoice_date: date | None = None
    tax_rate: Decimal
    subtotal: Decimal
    tax_amount: Decimal
    total_amount: Decimal
    notes: str | None = None
    is_incomplete: bool = Field(
        default=False,
        description="True when the items of this invoice could not be saved",
    )
    items: list[LineItemResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class InvoiceListResponse(BaseModel):
    """A page of invoice headers."""

    invoices: list[InvoiceResponse]
    count: int
    limit: int
    offset: int


class InvoiceStatusResponse(BaseModel):
    """Result of a status change."""

    invoice_id: int
    previous_status: str
    status: str


class CustomerResponse(BaseModel):
    """Customer response DTO."""

    id: int
    name: str
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    created_by: str | None = None
    created_at: datetime
    updated_at: datetime


class CustomerListResponse(BaseModel):
    """List of customers."""

    customers: list[CustomerResponse]
    count: int


class AccountantResponse(BaseModel):
    """Accountant profile with all-time totals."""

    user_id: str
    full_name: str
    email: str
    phone: str | None = None
    role: str
    total_sales: Decimal = Decimal("0.00")
    total_purchases: Decimal = Decimal("0.00")
    created_at: datetime


class AccountantListResponse(BaseModel):
    """List of accountants."""

    accountants: list[AccountantResponse]
    count: int


class SetupStatusResponse(BaseModel):
    """Whether the first administrator still has to be registered."""

    needs_setup: bool
    admin_count: int


class AccountantTotalsResponse(BaseModel):
    """One row of the per-accountant breakdown."""

    user_id: str
    name: str = Field(..., description="Display name resolved at presentation time")
    sales: Decimal
    purchases: Decimal
    net: Decimal


class MonthTotalsResponse(BaseModel):
    """One calendar month of the monthly breakdown."""

    month: str = Field(..., description="Sortable YYYY-MM key")
    label: str = Field(..., description="Display label, e.g. Jan 2026")
    sales: Decimal
    purchases: Decimal
    net: Decimal


class ReportResponse(BaseModel):
    """Financial report over a date window."""

    period: str
    start: date
    end: date
    type_filter: str
    total_sales: Decimal
    total_purchases: Decimal
    net_profit: Decimal
    invoice_count: int
    by_accountant: list[AccountantTotalsResponse] = Field(default_factory=list)
    by_month: list[MonthTotalsResponse] = Field(
        default_factory=list,
        description="Chronologically ascending",
    )


class DashboardStatsResponse(BaseModel):
    """Headline dashboard figures."""

    total_sales: Decimal
    total_purchases: Decimal
    net_profit: Decimal
    invoice_count: int
    accountant_count: int


class ComponentHealthResponse(BaseModel):
    """Health status of a backing component."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    uptime_seconds: float
    database: ComponentHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. INVOICE_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
