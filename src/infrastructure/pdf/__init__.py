"""PDF generation infrastructure."""

from src.infrastructure.pdf.invoice_renderer import Fpdf2InvoiceRenderer, IInvoicePdfRenderer
from src.infrastructure.pdf.report_renderer import Fpdf2ReportRenderer, IReportPdfRenderer

__all__ = [
    "Fpdf2InvoiceRenderer",
    "Fpdf2ReportRenderer",
    "IInvoicePdfRenderer",
    "IReportPdfRenderer",
]
