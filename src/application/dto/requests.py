"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation. They check shape and types
only; business rules (non-empty descriptions, positive prices, known
customers) are enforced by the use cases so they surface as 400s.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from src.core.entities import InvoiceStatus, InvoiceType, ReportPeriod, TypeFilter


class LineItemRequest(BaseModel):
    """One line of a new invoice."""

    description: str = Field(..., description="What is being sold or bought")
    quantity: Decimal = Field(..., description="Quantity, may be fractional")
    unit_price: Decimal = Field(..., description="Price per unit")


class CreateInvoiceRequest(BaseModel):
    """Request to create a sale or purchase invoice."""

    invoice_type: InvoiceType = Field(..., description="sale or purchase")
    customer_id: int | None = Field(
        default=None,
        description="Optional customer/supplier reference",
    )
    items: list[LineItemRequest] = Field(
        default_factory=list,
        description="Line items in display order",
    )
    tax_rate: Decimal | None = Field(
        default=None,
        description="Tax percentage; clamped to 0-100. Defaults to the configured rate",
        examples=["15"],
    )
    invoice_date: date | None = Field(
        default=None,
        description="Invoice date (YYYY-MM-DD); defaults to today",
    )
    notes: str | None = Field(default=None, description="Free-text notes")


class UpdateInvoiceStatusRequest(BaseModel):
    """Request to move an invoice to another status."""

    status: InvoiceStatus = Field(..., description="pending, paid or cancelled")


class CustomerRequest(BaseModel):
    """Create or replace a customer."""

    name: str = Field(..., min_length=1, description="Customer or supplier name")
    phone: str | None = Field(default=None, description="Phone number")
    email: str | None = Field(default=None, description="Email address")
    address: str | None = Field(default=None, description="Postal address")


class RegisterAccountantRequest(BaseModel):
    """Register an accountant for an existing identity-provider user."""

    user_id: str = Field(..., min_length=1, description="User id from the identity provider")
    full_name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=3, description="Contact email")
    phone: str | None = Field(default=None, description="Contact phone")


class SetupAdminRequest(BaseModel):
    """Profile of the first administrator; the user id comes from the caller."""

    full_name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=3, description="Contact email")
    phone: str | None = Field(default=None, description="Contact phone")


class ReportRequest(BaseModel):
    """Window and type selection for a financial report."""

    period: ReportPeriod = Field(default=ReportPeriod.MONTH, description="Window preset")
    start: date | None = Field(default=None, description="Custom window start")
    end: date | None = Field(default=None, description="Custom window end")
    type_filter: TypeFilter = Field(default=TypeFilter.ALL, description="sale, purchase or all")
