"""Create Report PDF Use Case."""

from datetime import date

from src.application.dto.requests import ReportRequest
from src.application.use_cases.create_invoice_pdf import PdfResult
from src.application.use_cases.generate_report import GenerateReportUseCase
from src.config import get_logger, get_settings
from src.core.entities import CallerContext
from src.infrastructure.pdf import Fpdf2ReportRenderer, IReportPdfRenderer

logger = get_logger(__name__)


class CreateReportPdfUseCase:
    """Generate a report for the caller and print it."""

    def __init__(
        self,
        report_use_case: GenerateReportUseCase | None = None,
        renderer: IReportPdfRenderer | None = None,
    ):
        self._report = report_use_case or GenerateReportUseCase()
        self._renderer = renderer or Fpdf2ReportRenderer()

    async def execute(
        self,
        request: ReportRequest,
        caller: CallerContext,
        today: date | None = None,
    ) -> PdfResult:
        result = await self._report.execute(request, caller, today=today)
        window = result.summary.window
        pdf_bytes = self._renderer.render(
            result.summary,
            result.accountant_names,
            month_format=get_settings().report.month_label_format,
        )

        logger.info(
            "create_report_pdf_complete",
            period=result.period.value,
            file_size=len(pdf_bytes),
        )
        return PdfResult(
            pdf_bytes=pdf_bytes,
            filename=f"report_{window.start.isoformat()}_{window.end.isoformat()}.pdf",
        )
