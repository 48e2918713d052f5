"""
Dependency injection container for FastAPI.

Provides stores, use cases and the caller context to route handlers.
Tests replace any of these through ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends, Request

from src.application.use_cases import (
    CreateInvoicePdfUseCase,
    CreateInvoiceUseCase,
    CreateReportPdfUseCase,
    GenerateReportUseCase,
    GetDashboardStatsUseCase,
    GetInvoiceUseCase,
    ListAccountantsUseCase,
    ListInvoicesUseCase,
    RegisterAccountantUseCase,
    RemoveAccountantUseCase,
    SetupAdminUseCase,
    UpdateInvoiceStatusUseCase,
    require_admin,
)
from src.config import Settings, get_logger, get_settings
from src.core.entities import CallerContext
from src.core.exceptions import AuthenticationError
from src.core.interfaces import IAccountantStore
from src.infrastructure.storage.sqlite import (
    SQLiteAccountantStore,
    SQLiteCustomerStore,
    SQLiteInvoiceStore,
    get_accountant_store,
    get_customer_store,
    get_invoice_store,
)

logger = get_logger(__name__)


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Store dependencies
async def get_inv_store() -> SQLiteInvoiceStore:
    """Get invoice store."""
    return await get_invoice_store()


async def get_cust_store() -> SQLiteCustomerStore:
    """Get customer store."""
    return await get_customer_store()


async def get_acct_store() -> SQLiteAccountantStore:
    """Get accountant store."""
    return await get_accountant_store()


# Identity
def get_caller_id(request: Request) -> str:
    """
    Authenticated user id forwarded by the gateway.

    Raises:
        AuthenticationError: If the identity header is missing or blank.
    """
    header = get_settings().api.user_header
    user_id = (request.headers.get(header) or "").strip()
    if not user_id:
        raise AuthenticationError(f"missing {header} header")
    return user_id


async def get_caller_context(
    user_id: str = Depends(get_caller_id),
    store: IAccountantStore = Depends(get_acct_store),
) -> CallerContext:
    """
    Resolve the caller's role from the profile store.

    Raises:
        AuthenticationError: If the user has no profile.
    """
    role = await store.get_role(user_id)
    if role is None:
        logger.warning("unknown_caller", user_id=user_id)
        raise AuthenticationError(f"no profile for user {user_id}")
    return CallerContext(user_id=user_id, role=role)


def get_admin_context(
    caller: CallerContext = Depends(get_caller_context),
) -> CallerContext:
    """Caller context that must belong to an admin."""
    require_admin(caller, "admin_only")
    return caller


# Use case dependencies
def get_create_invoice_use_case() -> CreateInvoiceUseCase:
    """Get create invoice use case."""
    return CreateInvoiceUseCase()


def get_get_invoice_use_case() -> GetInvoiceUseCase:
    """Get single-invoice use case."""
    return GetInvoiceUseCase()


def get_list_invoices_use_case() -> ListInvoicesUseCase:
    """Get list invoices use case."""
    return ListInvoicesUseCase()


def get_update_status_use_case() -> UpdateInvoiceStatusUseCase:
    """Get update invoice status use case."""
    return UpdateInvoiceStatusUseCase()


def get_invoice_pdf_use_case() -> CreateInvoicePdfUseCase:
    """Get invoice PDF use case."""
    return CreateInvoicePdfUseCase()


def get_report_use_case() -> GenerateReportUseCase:
    """Get generate report use case."""
    return GenerateReportUseCase()


def get_report_pdf_use_case() -> CreateReportPdfUseCase:
    """Get report PDF use case."""
    return CreateReportPdfUseCase()


def get_dashboard_use_case() -> GetDashboardStatsUseCase:
    """Get dashboard stats use case."""
    return GetDashboardStatsUseCase()


def get_list_accountants_use_case() -> ListAccountantsUseCase:
    """Get list accountants use case."""
    return ListAccountantsUseCase()


def get_register_accountant_use_case() -> RegisterAccountantUseCase:
    """Get register accountant use case."""
    return RegisterAccountantUseCase()


def get_remove_accountant_use_case() -> RemoveAccountantUseCase:
    """Get remove accountant use case."""
    return RemoveAccountantUseCase()


def get_setup_admin_use_case() -> SetupAdminUseCase:
    """Get setup admin use case."""
    return SetupAdminUseCase()
