"""Accountant management endpoints (admin only)."""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import (
    get_admin_context,
    get_list_accountants_use_case,
    get_register_accountant_use_case,
    get_remove_accountant_use_case,
)
from src.application.dto.requests import RegisterAccountantRequest
from src.application.dto.responses import (
    AccountantListResponse,
    AccountantResponse,
    ErrorResponse,
)
from src.application.use_cases import (
    ListAccountantsUseCase,
    RegisterAccountantUseCase,
    RemoveAccountantUseCase,
    profile_to_response,
)
from src.core.entities import CallerContext

router = APIRouter(prefix="/api/accountants", tags=["accountants"])


@router.get(
    "",
    response_model=AccountantListResponse,
    responses={403: {"model": ErrorResponse}},
)
async def list_accountants(
    caller: CallerContext = Depends(get_admin_context),
    use_case: ListAccountantsUseCase = Depends(get_list_accountants_use_case),
) -> AccountantListResponse:
    """List accountants with their all-time totals."""
    accountants = await use_case.execute(caller)
    return use_case.to_response(accountants)


@router.post(
    "",
    response_model=AccountantResponse,
    status_code=status.HTTP_201_CREATED,
    responses={403: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def register_accountant(
    request: RegisterAccountantRequest,
    caller: CallerContext = Depends(get_admin_context),
    use_case: RegisterAccountantUseCase = Depends(get_register_accountant_use_case),
) -> AccountantResponse:
    """Register an accountant for an identity-provider user."""
    profile = await use_case.execute(request, caller)
    return profile_to_response(profile)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def remove_accountant(
    user_id: str,
    caller: CallerContext = Depends(get_admin_context),
    use_case: RemoveAccountantUseCase = Depends(get_remove_accountant_use_case),
) -> None:
    """Remove an accountant; their invoices are kept."""
    await use_case.execute(user_id, caller)
