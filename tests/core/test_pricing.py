"""Tests for line pricing and invoice totals."""

from decimal import Decimal

import pytest

from src.core.entities import InvoiceLineItem
from src.core.pricing import (
    ZERO,
    clamp_tax_rate,
    compute_totals,
    fits_cents,
    price_line,
    quantize_money,
    to_decimal,
)


def _line(quantity: str, unit_price: str) -> InvoiceLineItem:
    return InvoiceLineItem(
        description="line", quantity=Decimal(quantity), unit_price=Decimal(unit_price)
    )


class TestPriceLine:
    def test_multiplies(self):
        assert price_line(Decimal("2"), Decimal("50")) == Decimal("100")

    def test_fractional_quantity(self):
        assert price_line("1.5", "10.10") == Decimal("15.150")

    def test_float_inputs_have_no_binary_noise(self):
        assert price_line(0.1, 3) == Decimal("0.3")


class TestComputeTotals:
    def test_three_lines_with_tax(self):
        items = [_line("2", "50"), _line("1", "100"), _line("3", "10")]
        totals = compute_totals(items, Decimal("15"))
        assert totals.subtotal == Decimal("230")
        assert totals.tax_amount == Decimal("34.5")
        assert totals.total_amount == Decimal("264.5")

    def test_empty_items(self):
        totals = compute_totals([], Decimal("15"))
        assert totals == (ZERO, ZERO, ZERO)

    def test_zero_tax(self):
        totals = compute_totals([_line("3", "9.99")], 0)
        assert totals.tax_amount == ZERO
        assert totals.total_amount == totals.subtotal == Decimal("29.97")

    def test_idempotent(self):
        items = [_line("2", "50"), _line("1", "130")]
        assert compute_totals(items, "15") == compute_totals(items, "15")

    def test_total_is_subtotal_plus_tax(self):
        totals = compute_totals([_line("7", "3.33"), _line("0.5", "19.99")], "5")
        assert totals.total_amount == totals.subtotal + totals.tax_amount


class TestClampTaxRate:
    @pytest.mark.parametrize(
        "rate, expected",
        [("-5", "0"), ("0", "0"), ("15", "15"), ("100", "100"), ("250", "100")],
    )
    def test_clamps_to_percentage_range(self, rate, expected):
        assert clamp_tax_rate(rate) == Decimal(expected)


class TestQuantizeMoney:
    def test_rounds_half_up(self):
        assert quantize_money(Decimal("2.345")) == Decimal("2.35")
        assert quantize_money(Decimal("2.344")) == Decimal("2.34")

    def test_pads_to_cents(self):
        assert str(quantize_money(5)) == "5.00"

    def test_fits_cents(self):
        assert fits_cents(Decimal("264.5"))
        assert fits_cents(Decimal("0.001"))
        assert not fits_cents(Decimal("1E+28"))


def test_to_decimal_passes_decimal_through():
    value = Decimal("1.10")
    assert to_decimal(value) is value
