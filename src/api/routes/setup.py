"""First-run setup endpoints."""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_caller_id, get_setup_admin_use_case
from src.application.dto.requests import SetupAdminRequest
from src.application.dto.responses import AccountantResponse, ErrorResponse, SetupStatusResponse
from src.application.use_cases import SetupAdminUseCase, profile_to_response

router = APIRouter(prefix="/api/setup", tags=["setup"])


@router.get("/status", response_model=SetupStatusResponse)
async def setup_status(
    use_case: SetupAdminUseCase = Depends(get_setup_admin_use_case),
) -> SetupStatusResponse:
    """Report whether the first administrator still has to be registered."""
    return await use_case.status()


@router.post(
    "/admin",
    response_model=AccountantResponse,
    status_code=status.HTTP_201_CREATED,
    responses={401: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def setup_admin(
    request: SetupAdminRequest,
    user_id: str = Depends(get_caller_id),
    use_case: SetupAdminUseCase = Depends(get_setup_admin_use_case),
) -> AccountantResponse:
    """Make the calling user the first administrator."""
    profile = await use_case.execute(user_id, request)
    return profile_to_response(profile)
