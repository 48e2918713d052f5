"""
Invoice PDF printer using fpdf2.

Prints the letterhead, invoice metadata, the item table and the
subtotal/tax/total block. Amounts are rounded to cents here and nowhere
earlier.
"""

from abc import ABC, abstractmethod

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from src.core.entities import Invoice, InvoiceType
from src.core.pricing import quantize_money
from src.infrastructure.pdf.base import BasePdfRenderer, format_money

ITEM_COLUMNS = ["Description", "Qty", "Unit Price", "Total"]
ITEM_WIDTHS = [94, 24, 36, 36]


class IInvoicePdfRenderer(ABC):
    """Interface for invoice PDF rendering implementations."""

    @abstractmethod
    def render(self, invoice: Invoice) -> bytes:
        """Render an invoice into PDF bytes."""
        ...


class Fpdf2InvoiceRenderer(BasePdfRenderer, IInvoicePdfRenderer):
    """Renders sale and purchase invoices."""

    def render(self, invoice: Invoice) -> bytes:
        pdf = self._new_document()
        title = "SALES INVOICE" if invoice.invoice_type == InvoiceType.SALE else "PURCHASE INVOICE"
        self._render_letterhead(pdf, title)
        self._render_metadata(pdf, invoice)
        self._render_separator(pdf)
        self._render_items(pdf, invoice)
        self._render_totals(pdf, invoice)
        return bytes(pdf.output())

    def _render_metadata(self, pdf: FPDF, invoice: Invoice) -> None:
        pdf.set_font("Helvetica", "", 10)
        lines = [
            f"Invoice No: {invoice.invoice_number}",
            f"Date: {invoice.invoice_date.isoformat() if invoice.invoice_date else '-'}",
            f"Status: {invoice.status.value.title()}",
        ]
        for line in lines:
            pdf.cell(0, 6, line, new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        if invoice.customer is not None:
            label = "Customer" if invoice.invoice_type == InvoiceType.SALE else "Supplier"
            for line in (
                f"{label}: {invoice.customer.name}",
                invoice.customer.phone and f"Phone: {invoice.customer.phone}",
                invoice.customer.address and f"Address: {invoice.customer.address}",
            ):
                if line:
                    text = self._safe_text(line)
                    self._set_font_for(pdf, text, size=10)
                    pdf.cell(0, 6, text, new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        if invoice.notes:
            notes = self._safe_text(f"Notes: {invoice.notes}")
            self._set_font_for(pdf, notes, size=10)
            pdf.multi_cell(0, 6, notes, new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        if invoice.is_incomplete:
            pdf.set_font("Helvetica", "B", 10)
            pdf.set_text_color(180, 0, 0)
            pdf.cell(
                0, 6, "Line items for this invoice could not be saved.",
                new_x=XPos.LMARGIN, new_y=YPos.NEXT,
            )
            pdf.set_text_color(0, 0, 0)
        pdf.ln(3)

    def _render_items(self, pdf: FPDF, invoice: Invoice) -> None:
        pdf.set_font("Helvetica", "B", 12)
        pdf.cell(0, 8, "Items", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self._render_table_header(pdf, ITEM_COLUMNS, ITEM_WIDTHS)

        for idx, item in enumerate(invoice.items, 1):
            self._render_table_row(
                pdf,
                [
                    item.description[:60],
                    f"{item.quantity.normalize():f}",
                    format_money(item.unit_price),
                    format_money(item.extended_price),
                ],
                ITEM_WIDTHS,
                shaded=idx % 2 == 0,
            )
        pdf.ln(3)

    def _render_totals(self, pdf: FPDF, invoice: Invoice) -> None:
        currency = self._settings.currency_label
        rate = quantize_money(invoice.tax_rate).normalize()
        self._render_total_line(pdf, "Subtotal:", f"{format_money(invoice.subtotal)} {currency}")
        self._render_total_line(
            pdf, f"Tax ({rate:f}%):", f"{format_money(invoice.tax_amount)} {currency}"
        )
        self._render_total_line(
            pdf, "Total:", f"{format_money(invoice.total_amount)} {currency}", bold=True, size=12
        )
