"""
Create Invoice PDF Use Case.

Loads an invoice the caller may see and prints it.
"""

from dataclasses import dataclass

from src.application.use_cases.get_invoice import GetInvoiceUseCase
from src.config import get_logger
from src.core.entities import CallerContext
from src.core.interfaces import IInvoiceStore
from src.infrastructure.pdf import Fpdf2InvoiceRenderer, IInvoicePdfRenderer

logger = get_logger(__name__)


@dataclass
class PdfResult:
    """Rendered PDF and the file name to offer it under."""

    pdf_bytes: bytes
    filename: str

    @property
    def file_size(self) -> int:
        return len(self.pdf_bytes)


class CreateInvoicePdfUseCase:
    """
    Use case for printing an invoice.

    Flow:
    1. Load the invoice with items (visibility rules apply)
    2. Render it via the invoice renderer
    3. Return PDF bytes and a download name
    """

    def __init__(
        self,
        invoice_store: IInvoiceStore | None = None,
        renderer: IInvoicePdfRenderer | None = None,
    ):
        self._get_invoice = GetInvoiceUseCase(invoice_store)
        self._renderer = renderer or Fpdf2InvoiceRenderer()

    async def execute(self, invoice_id: int, caller: CallerContext) -> PdfResult:
        logger.info("create_invoice_pdf_started", invoice_id=invoice_id)

        invoice = await self._get_invoice.execute(invoice_id, caller)
        pdf_bytes = self._renderer.render(invoice)

        logger.info(
            "create_invoice_pdf_complete",
            invoice_id=invoice_id,
            file_size=len(pdf_bytes),
        )
        return PdfResult(pdf_bytes=pdf_bytes, filename=f"{invoice.invoice_number}.pdf")
