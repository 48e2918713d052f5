"""Dashboard endpoints."""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_caller_context, get_dashboard_use_case
from src.application.dto.responses import DashboardStatsResponse
from src.application.use_cases import GetDashboardStatsUseCase
from src.core.entities import CallerContext

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse)
async def dashboard_stats(
    caller: CallerContext = Depends(get_caller_context),
    use_case: GetDashboardStatsUseCase = Depends(get_dashboard_use_case),
) -> DashboardStatsResponse:
    """Headline totals over the caller's visible invoices."""
    stats = await use_case.execute(caller)
    return use_case.to_response(stats)
