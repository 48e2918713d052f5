"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from datetime import date
from decimal import Decimal

import pytest

from src.config import reset_settings
from src.core.entities import (
    CallerContext,
    Invoice,
    InvoiceLineItem,
    InvoiceStatus,
    InvoiceType,
    Role,
)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so env patches in one test do not leak."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def admin_caller() -> CallerContext:
    return CallerContext(user_id="admin-1", role=Role.ADMIN)


@pytest.fixture
def accountant_caller() -> CallerContext:
    return CallerContext(user_id="acct-1", role=Role.ACCOUNTANT)


@pytest.fixture
def other_accountant_caller() -> CallerContext:
    return CallerContext(user_id="acct-2", role=Role.ACCOUNTANT)


@pytest.fixture
def make_invoice() -> Callable[..., Invoice]:
    """Factory for persisted-looking invoices with a single priced line."""

    def _make(
        total: str | int = 100,
        invoice_type: InvoiceType = InvoiceType.SALE,
        owner_id: str | None = "acct-1",
        invoice_date: date | None = date(2026, 3, 10),
        invoice_id: int = 1,
        status: InvoiceStatus = InvoiceStatus.PENDING,
    ) -> Invoice:
        return Invoice(
            id=invoice_id,
            invoice_number=f"INV-202603-{invoice_id:06d}",
            invoice_type=invoice_type,
            owner_id=owner_id,
            status=status,
            items=[
                InvoiceLineItem(
                    id=invoice_id,
                    invoice_id=invoice_id,
                    description="Service",
                    quantity=Decimal("1"),
                    unit_price=Decimal(str(total)),
                )
            ],
            invoice_date=invoice_date,
        )

    return _make
