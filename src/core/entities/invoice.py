"""
Invoice domain entities with Pydantic v2 validation.

Money fields are ``Decimal`` and kept exact; derived amounts are recomputed
from the line items whenever an invoice is built with items.
"""

from datetime import UTC, date, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, computed_field, model_validator

from src.core.entities.customer import Customer
from src.core.exceptions import InvalidStatusTransitionError
from src.core.pricing import ZERO, compute_totals, price_line


class InvoiceType(str, Enum):
    """Direction of an invoice."""

    SALE = "sale"
    PURCHASE = "purchase"


class InvoiceStatus(str, Enum):
    """Invoice payment status."""

    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"


# Every status may move to every other status. Tighten here if cancelled
# should become terminal.
STATUS_TRANSITIONS: dict[InvoiceStatus, frozenset[InvoiceStatus]] = {
    status: frozenset(InvoiceStatus) for status in InvoiceStatus
}


def can_transition(current: InvoiceStatus, requested: InvoiceStatus) -> bool:
    """Check the transition table."""
    return requested in STATUS_TRANSITIONS.get(current, frozenset())


class InvoiceLineItem(BaseModel):
    """A single priced line on an invoice."""

    id: int | None = None
    invoice_id: int | None = None
    position: int = 0  # insertion order within the invoice
    description: str
    quantity: Decimal
    unit_price: Decimal
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def extended_price(self) -> Decimal:
        """quantity * unit_price, never stored stale."""
        return price_line(self.quantity, self.unit_price)


class Invoice(BaseModel):
    """
    A sales or purchase invoice with its line items.

    Totals are derived from ``items`` whenever items are present. A header
    flagged ``is_incomplete`` lost its items write: it keeps the totals
    priced at creation while ``items`` stays empty, so subtotal equals the
    sum of extended prices only for complete invoices. Reports count such
    headers at their stored totals.
    """

    id: int | None = None
    invoice_number: str = ""  # assigned at persistence
    invoice_type: InvoiceType
    customer_id: int | None = None
    customer: Customer | None = None  # joined for display only
    owner_id: str | None = None  # accountant user id
    items: list[InvoiceLineItem] = Field(default_factory=list)
    tax_rate: Decimal = ZERO
    subtotal: Decimal = ZERO
    tax_amount: Decimal = ZERO
    total_amount: Decimal = ZERO
    status: InvoiceStatus = InvoiceStatus.PENDING
    invoice_date: date | None = Field(default_factory=date.today)
    notes: str | None = None
    is_incomplete: bool = False  # header saved, items write failed
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @model_validator(mode="after")
    def derive_totals(self) -> "Invoice":
        """Derive subtotal, tax and total from items when items are loaded."""
        if self.items:
            self.recalculate()
        return self

    def recalculate(self) -> "Invoice":
        """Recompute derived amounts from the current items and tax rate."""
        totals = compute_totals(self.items, self.tax_rate)
        self.subtotal = totals.subtotal
        self.tax_amount = totals.tax_amount
        self.total_amount = totals.total_amount
        return self

    def change_status(self, requested: InvoiceStatus) -> InvoiceStatus:
        """Move to ``requested`` and return the previous status."""
        if not can_transition(self.status, requested):
            raise InvalidStatusTransitionError(
                self.id, self.status.value, requested.value
            )
        previous = self.status
        self.status = requested
        self.updated_at = datetime.now(UTC)
        return previous


class InvoiceFilter(BaseModel):
    """Equality and range predicates for listing invoices."""

    owner_id: str | None = None  # None means every owner
    invoice_type: InvoiceType | None = None
    start_date: date | None = None
    end_date: date | None = None
    include_undated: bool = False  # keep rows with no date alongside the range
    limit: int | None = None
    offset: int = 0
