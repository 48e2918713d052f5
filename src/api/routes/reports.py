"""Financial report endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from src.api.dependencies import (
    get_caller_context,
    get_report_pdf_use_case,
    get_report_use_case,
)
from src.application.dto.requests import ReportRequest
from src.application.dto.responses import ErrorResponse, ReportResponse
from src.application.use_cases import CreateReportPdfUseCase, GenerateReportUseCase
from src.core.entities import CallerContext, ReportPeriod, TypeFilter

router = APIRouter(prefix="/api/reports", tags=["reports"])


def report_query(
    period: ReportPeriod = Query(default=ReportPeriod.MONTH),
    start: date | None = Query(default=None),
    end: date | None = Query(default=None),
    type_filter: TypeFilter = Query(default=TypeFilter.ALL, alias="type"),
) -> ReportRequest:
    """Collect the report query string into a request DTO."""
    return ReportRequest(period=period, start=start, end=end, type_filter=type_filter)


@router.get(
    "",
    response_model=ReportResponse,
    responses={401: {"model": ErrorResponse}},
)
async def get_report(
    request: ReportRequest = Depends(report_query),
    caller: CallerContext = Depends(get_caller_context),
    use_case: GenerateReportUseCase = Depends(get_report_use_case),
) -> ReportResponse:
    """Totals, per-accountant and monthly breakdown for a window."""
    result = await use_case.execute(request, caller)
    return use_case.to_response(result)


@router.get("/pdf", responses={401: {"model": ErrorResponse}})
async def get_report_pdf(
    request: ReportRequest = Depends(report_query),
    caller: CallerContext = Depends(get_caller_context),
    use_case: CreateReportPdfUseCase = Depends(get_report_pdf_use_case),
) -> Response:
    """Download the report as a PDF."""
    result = await use_case.execute(request, caller)
    return Response(
        content=result.pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )
