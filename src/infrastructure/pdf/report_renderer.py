"""Financial report PDF printer using fpdf2."""

from abc import ABC, abstractmethod

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from src.core.entities import ReportSummary
from src.infrastructure.pdf.base import BasePdfRenderer, format_money

GROUP_COLUMNS = ["", "Sales", "Purchases", "Net"]
GROUP_WIDTHS = [70, 40, 40, 40]


class IReportPdfRenderer(ABC):
    """Interface for report PDF rendering implementations."""

    @abstractmethod
    def render(
        self,
        summary: ReportSummary,
        accountant_names: dict[str, str],
        month_format: str = "%b %Y",
    ) -> bytes:
        """Render a report summary into PDF bytes."""
        ...


class Fpdf2ReportRenderer(BasePdfRenderer, IReportPdfRenderer):
    """Renders headline totals, the per-accountant table and the monthly table."""

    def render(
        self,
        summary: ReportSummary,
        accountant_names: dict[str, str],
        month_format: str = "%b %Y",
    ) -> bytes:
        pdf = self._new_document()
        self._render_letterhead(pdf, "FINANCIAL REPORT")

        pdf.set_font("Helvetica", "", 10)
        pdf.cell(
            0, 6,
            f"Period: {summary.window.start.isoformat()} to {summary.window.end.isoformat()}",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.cell(
            0, 6, f"Invoice type: {summary.type_filter.value}",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.cell(
            0, 6, f"Invoices: {summary.invoice_count}",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        self._render_separator(pdf)

        currency = self._settings.currency_label
        self._render_total_line(pdf, "Total Sales:", f"{format_money(summary.total_sales)} {currency}")
        self._render_total_line(
            pdf, "Total Purchases:", f"{format_money(summary.total_purchases)} {currency}"
        )
        self._render_total_line(
            pdf, "Net Profit:", f"{format_money(summary.net_profit)} {currency}", bold=True, size=12
        )
        pdf.ln(4)

        rows = [
            (accountant_names.get(user_id, user_id), totals.sales, totals.purchases, totals.net)
            for user_id, totals in summary.by_accountant.items()
        ]
        self._render_group(pdf, "By Accountant", "Accountant", rows)

        rows = [
            (bucket.label(month_format), bucket.sales, bucket.purchases, bucket.sales - bucket.purchases)
            for bucket in summary.by_month
        ]
        self._render_group(pdf, "By Month", "Month", rows)

        return bytes(pdf.output())

    def _render_group(self, pdf: FPDF, title: str, first_column: str, rows: list[tuple]) -> None:
        pdf.set_font("Helvetica", "B", 12)
        pdf.cell(0, 8, title, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        if not rows:
            pdf.set_font("Helvetica", "I", 9)
            pdf.cell(0, 6, "No data for this period.", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            pdf.ln(3)
            return

        self._render_table_header(pdf, [first_column, *GROUP_COLUMNS[1:]], GROUP_WIDTHS)
        for idx, (label, sales, purchases, net) in enumerate(rows, 1):
            self._render_table_row(
                pdf,
                [label, format_money(sales), format_money(purchases), format_money(net)],
                GROUP_WIDTHS,
                shaded=idx % 2 == 0,
            )
        pdf.ln(3)
