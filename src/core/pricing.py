"""
Line pricing and invoice totals.

Pure decimal arithmetic shared by the invoice entities, the create-invoice
use case and the printers. Nothing here validates or rounds: values are kept
exact and only quantized by ``quantize_money`` at the presentation boundary.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import NamedTuple, Protocol

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")


class PricedLine(Protocol):
    """Anything exposing an extended price."""

    @property
    def extended_price(self) -> Decimal: ...


class InvoiceTotals(NamedTuple):
    """Subtotal, tax and grand total of an invoice."""

    subtotal: Decimal
    tax_amount: Decimal
    total_amount: Decimal


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a number to Decimal without binary float artefacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def price_line(
    quantity: Decimal | int | float | str,
    unit_price: Decimal | int | float | str,
) -> Decimal:
    """Return the extended price of a line: quantity * unit_price."""
    return to_decimal(quantity) * to_decimal(unit_price)


def compute_totals(
    items: Iterable[PricedLine],
    tax_rate: Decimal | int | float | str,
) -> InvoiceTotals:
    """
    Total a sequence of priced lines.

    The tax rate is a percentage and is used as given; callers clamp it.
    """
    subtotal = sum((item.extended_price for item in items), ZERO)
    tax_amount = subtotal * to_decimal(tax_rate) / HUNDRED
    return InvoiceTotals(
        subtotal=subtotal,
        tax_amount=tax_amount,
        total_amount=subtotal + tax_amount,
    )


def clamp_tax_rate(tax_rate: Decimal | int | float | str) -> Decimal:
    """Clamp a tax percentage to [0, 100]."""
    rate = to_decimal(tax_rate)
    if rate < ZERO:
        return ZERO
    if rate > HUNDRED:
        return HUNDRED
    return rate


def quantize_money(amount: Decimal | int | float | str) -> Decimal:
    """Round an amount to cents, half up."""
    return to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def fits_cents(amount: Decimal | int | float | str) -> bool:
    """Whether an amount can be rounded to cents without losing digits."""
    try:
        quantize_money(amount)
    except InvalidOperation:
        return False
    return True
