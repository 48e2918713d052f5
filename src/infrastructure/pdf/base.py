"""
Shared fpdf2 plumbing for the invoice and report printers.

Company letterhead, page footer, money formatting and the Arabic text
fallback live here so both documents look alike.
"""

import os
import re
from datetime import UTC, datetime
from decimal import Decimal

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from src.config import get_logger
from src.config.settings import PdfSettings, get_settings
from src.core.pricing import quantize_money

logger = get_logger(__name__)

_ARABIC_RE = re.compile(
    r"[\u0600-\u06FF\u0750-\u077F\u08A0-\u08FF\uFB50-\uFDFF\uFE70-\uFEFF]"
)

ARABIC_FONT = "ArabicFont"


def contains_arabic(text: str) -> bool:
    """Return True if *text* contains at least one Arabic character."""
    return bool(_ARABIC_RE.search(text))


def strip_arabic(text: str) -> str:
    """Replace Arabic characters with '?' so core fonts can encode the text."""
    return _ARABIC_RE.sub("?", text)


def format_money(amount: Decimal) -> str:
    """Two-decimal, thousands-separated amount rounded half up."""
    return f"{quantize_money(amount):,.2f}"


class LedgerPdf(FPDF):
    """FPDF document with the ledger footer on every page."""

    def __init__(self, pdf_settings: PdfSettings) -> None:
        super().__init__()
        self._pdf_settings = pdf_settings
        self._generated = datetime.now(UTC).strftime("%Y-%m-%d %H:%M UTC")

    def footer(self) -> None:
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.cell(0, 5, self._pdf_settings.footer_text, align="L")
        self.set_x(-60)
        self.cell(
            0,
            5,
            f"Page {self.page_no()} of {{nb}} | {self._generated}",
            align="R",
        )


class BasePdfRenderer:
    """Letterhead, fonts and table helpers shared by the printers."""

    def __init__(self, pdf_settings: PdfSettings | None = None) -> None:
        self._settings = pdf_settings or get_settings().pdf
        self._arabic_font_loaded = False

    def _new_document(self) -> LedgerPdf:
        pdf = LedgerPdf(self._settings)
        pdf.alias_nb_pages()
        pdf.set_auto_page_break(auto=True, margin=20)
        self._arabic_font_loaded = False
        self._maybe_load_arabic_font(pdf)
        pdf.add_page()
        return pdf

    def _maybe_load_arabic_font(self, pdf: FPDF) -> None:
        font_path = self._settings.arabic_font_path
        if not font_path or not os.path.isfile(font_path):
            return
        try:
            pdf.add_font(ARABIC_FONT, "", font_path)
            self._arabic_font_loaded = True
        except Exception as e:
            logger.warning("arabic_font_load_failed", font_path=font_path, error=str(e))
            self._arabic_font_loaded = False

    def _safe_text(self, text: str | None) -> str:
        """Return *text* printable with the fonts available."""
        text = text or ""
        if self._arabic_font_loaded or not contains_arabic(text):
            return text
        return strip_arabic(text)

    def _set_font_for(
        self,
        pdf: FPDF,
        text: str,
        style: str = "",
        size: int = 10,
    ) -> None:
        """Switch to the Arabic font only when the text needs it."""
        if self._arabic_font_loaded and contains_arabic(text):
            pdf.set_font(ARABIC_FONT, "", size)
        else:
            pdf.set_font("Helvetica", style, size)

    def _render_letterhead(self, pdf: FPDF, title: str) -> None:
        """Logo, company block and the document title."""
        logo_path = self._settings.logo_path
        if logo_path and os.path.isfile(logo_path):
            try:
                pdf.image(logo_path, x=10, y=10, w=40, h=20)
            except Exception as e:
                logger.warning("pdf_logo_failed", logo_path=logo_path, error=str(e))
                self._draw_logo_placeholder(pdf)
        else:
            self._draw_logo_placeholder(pdf)

        pdf.set_xy(55, 10)
        company_name = self._safe_text(self._settings.company_name)
        self._set_font_for(pdf, company_name, "B", 10)
        pdf.cell(0, 5, company_name, new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.set_font("Helvetica", "", 8)
        for line in (
            self._settings.company_address,
            f"Tel: {self._settings.company_phone}" if self._settings.company_phone else "",
            f"Email: {self._settings.company_email}" if self._settings.company_email else "",
        ):
            if line:
                pdf.set_x(55)
                pdf.cell(0, 4, self._safe_text(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        if pdf.get_y() < 32:
            pdf.set_y(32)

        pdf.ln(4)
        pdf.set_font("Helvetica", "B", 18)
        pdf.cell(0, 12, title, align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(3)

    @staticmethod
    def _draw_logo_placeholder(pdf: FPDF) -> None:
        x, y, w, h = 10, 10, 40, 20
        pdf.set_draw_color(180, 180, 180)
        pdf.rect(x, y, w, h)
        pdf.set_font("Helvetica", "I", 10)
        pdf.set_text_color(180, 180, 180)
        pdf.set_xy(x, y + 6)
        pdf.cell(w, 8, "LOGO", align="C")
        pdf.set_draw_color(0, 0, 0)
        pdf.set_text_color(0, 0, 0)

    @staticmethod
    def _render_separator(pdf: FPDF) -> None:
        y = pdf.get_y()
        pdf.set_draw_color(100, 100, 100)
        pdf.line(10, y, 200, y)
        pdf.set_draw_color(0, 0, 0)
        pdf.ln(4)

    @staticmethod
    def _render_table_header(pdf: FPDF, headers: list[str], widths: list[int]) -> None:
        pdf.set_font("Helvetica", "B", 9)
        pdf.set_fill_color(70, 70, 70)
        pdf.set_text_color(255, 255, 255)
        for header, width in zip(headers, widths):
            pdf.cell(width, 7, header, border=1, fill=True, align="C")
        pdf.ln()
        pdf.set_text_color(0, 0, 0)

    def _render_table_row(
        self,
        pdf: FPDF,
        cells: list[str],
        widths: list[int],
        shaded: bool,
        first_align: str = "L",
    ) -> None:
        """One bordered row; the first cell is text, the rest are right-aligned numbers."""
        if shaded:
            pdf.set_fill_color(240, 240, 240)
        for i, (value, width) in enumerate(zip(cells, widths)):
            if i == 0:
                text = self._safe_text(value)
                self._set_font_for(pdf, text, size=8)
                pdf.cell(width, 6, text, border=1, fill=shaded, align=first_align)
            else:
                pdf.set_font("Helvetica", "", 8)
                pdf.cell(width, 6, value, border=1, fill=shaded, align="R")
        pdf.ln()

    @staticmethod
    def _render_total_line(pdf: FPDF, label: str, value: str, bold: bool = False, size: int = 10) -> None:
        pdf.set_font("Helvetica", "B" if bold else "", size)
        pdf.cell(120, 7 if size > 10 else 6, label, align="R")
        pdf.cell(0, 7 if size > 10 else 6, value, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
