"""Tests for the invoice and report PDF printers."""

import zlib
from datetime import date
from decimal import Decimal

import pytest

from src.config.settings import PdfSettings
from src.core.entities import (
    Customer,
    InvoiceType,
    MonthBucket,
    PartyTotals,
    ReportSummary,
    ReportWindow,
)
from src.infrastructure.pdf import Fpdf2InvoiceRenderer, Fpdf2ReportRenderer
from src.infrastructure.pdf.base import contains_arabic, format_money, strip_arabic


def _extract_pdf_text(pdf_bytes: bytes) -> str:
    """Decompress FlateDecode streams in *pdf_bytes* and return all text."""
    texts = [pdf_bytes.decode("latin-1")]
    start_marker = b"stream\n"
    end_marker = b"\nendstream"
    idx = 0
    while True:
        s = pdf_bytes.find(start_marker, idx)
        if s == -1:
            break
        s += len(start_marker)
        e = pdf_bytes.find(end_marker, s)
        if e == -1:
            break
        try:
            texts.append(zlib.decompress(pdf_bytes[s:e]).decode("latin-1", errors="replace"))
        except zlib.error:
            pass
        idx = e + len(end_marker)
    return "\n".join(texts)


@pytest.fixture
def pdf_settings() -> PdfSettings:
    return PdfSettings(
        company_name="Test Corp",
        company_address="123 Test Street",
        footer_text="Test Footer",
        currency_label="SAR",
        logo_path="",
        arabic_font_path="",
    )


class TestHelpers:
    def test_format_money(self):
        assert format_money(Decimal("1234.5")) == "1,234.50"
        assert format_money(Decimal("0.005")) == "0.01"

    def test_arabic_detection(self):
        assert contains_arabic("شركة")
        assert not contains_arabic("Acme")

    def test_strip_arabic(self):
        assert strip_arabic("Acme ش") == "Acme ?"


class TestInvoiceRenderer:
    def test_renders_pdf(self, pdf_settings, make_invoice):
        invoice = make_invoice(264.5)
        pdf_bytes = Fpdf2InvoiceRenderer(pdf_settings).render(invoice)

        assert pdf_bytes.startswith(b"%PDF")
        text = _extract_pdf_text(pdf_bytes)
        assert "INV-202603-000001" in text
        assert "Test Corp" in text

    def test_purchase_with_customer_and_notes(self, pdf_settings, make_invoice):
        invoice = make_invoice(50, InvoiceType.PURCHASE)
        invoice.customer = Customer(id=1, name="Supplier Ltd", phone="0500")
        invoice.notes = "Net 30"
        text = _extract_pdf_text(Fpdf2InvoiceRenderer(pdf_settings).render(invoice))

        assert "PURCHASE" in text
        assert "Supplier Ltd" in text

    def test_arabic_without_font_does_not_fail(self, pdf_settings, make_invoice):
        invoice = make_invoice()
        invoice.customer = Customer(id=1, name="شركة النور")
        assert Fpdf2InvoiceRenderer(pdf_settings).render(invoice).startswith(b"%PDF")

    def test_incomplete_invoice(self, pdf_settings, make_invoice):
        invoice = make_invoice()
        invoice.items = []
        invoice.is_incomplete = True
        assert Fpdf2InvoiceRenderer(pdf_settings).render(invoice).startswith(b"%PDF")


class TestReportRenderer:
    def test_renders_groups(self, pdf_settings):
        summary = ReportSummary(
            window=ReportWindow(start=date(2026, 1, 1), end=date(2026, 3, 31)),
            total_sales=Decimal("300"),
            total_purchases=Decimal("120"),
            invoice_count=3,
            by_accountant={"acct-1": PartyTotals(sales=Decimal("300"), purchases=Decimal("120"))},
            by_month=[MonthBucket(year=2026, month=1, sales=Decimal("300"))],
        )
        pdf_bytes = Fpdf2ReportRenderer(pdf_settings).render(summary, {"acct-1": "Sara Ali"})

        assert pdf_bytes.startswith(b"%PDF")
        text = _extract_pdf_text(pdf_bytes)
        assert "Sara Ali" in text
        assert "Jan 2026" in text

    def test_empty_report(self, pdf_settings):
        summary = ReportSummary(window=ReportWindow(start=date(2026, 2, 1), end=date(2026, 1, 1)))
        assert Fpdf2ReportRenderer(pdf_settings).render(summary, {}).startswith(b"%PDF")
