"""
Accountant management use cases.

Everything here except the setup bootstrap is restricted to admins.
"""

from src.application.dto.requests import RegisterAccountantRequest, SetupAdminRequest
from src.application.dto.responses import (
    AccountantListResponse,
    AccountantResponse,
    SetupStatusResponse,
)
from src.config import get_logger
from src.core.entities import (
    AccountantProfile,
    AccountantWithTotals,
    CallerContext,
    InvoiceFilter,
    Role,
)
from src.core.exceptions import (
    AccountantNotFoundError,
    PermissionDeniedError,
    SetupAlreadyCompletedError,
)
from src.core.interfaces import IAccountantStore, IInvoiceStore
from src.core.pricing import quantize_money
from src.core.services import ReportAggregator

logger = get_logger(__name__)


def require_admin(caller: CallerContext, operation: str) -> None:
    """Raise PermissionDeniedError unless the caller is an admin."""
    if not caller.is_privileged:
        logger.warning("permission_denied", operation=operation, caller=caller.user_id)
        raise PermissionDeniedError(operation)


def profile_to_response(
    profile: AccountantProfile,
    totals: AccountantWithTotals | None = None,
) -> AccountantResponse:
    return AccountantResponse(
        user_id=profile.user_id,
        full_name=profile.full_name,
        email=profile.email,
        phone=profile.phone,
        role=profile.role.value,
        total_sales=quantize_money(totals.total_sales) if totals else quantize_money(0),
        total_purchases=quantize_money(totals.total_purchases) if totals else quantize_money(0),
        created_at=profile.created_at,
    )


class _AccountantUseCaseBase:
    def __init__(
        self,
        accountant_store: IAccountantStore | None = None,
        invoice_store: IInvoiceStore | None = None,
    ):
        self._accountant_store = accountant_store
        self._invoice_store = invoice_store

    async def _get_accountant_store(self) -> IAccountantStore:
        if self._accountant_store is None:
            from src.infrastructure.storage.sqlite import get_accountant_store

            self._accountant_store = await get_accountant_store()
        return self._accountant_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from src.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store


class ListAccountantsUseCase(_AccountantUseCaseBase):
    """List accountants with their all-time sales and purchases."""

    async def execute(self, caller: CallerContext) -> list[AccountantWithTotals]:
        require_admin(caller, "list_accountants")
        profiles = await (await self._get_accountant_store()).list_profiles(Role.ACCOUNTANT)
        invoices = await self._get_invoice_store()

        aggregator = ReportAggregator()
        result = []
        for profile in profiles:
            stats = aggregator.summarize(
                await invoices.list_invoices(InvoiceFilter(owner_id=profile.user_id))
            )
            result.append(
                AccountantWithTotals(
                    profile=profile,
                    total_sales=stats.total_sales,
                    total_purchases=stats.total_purchases,
                )
            )
        return result

    @staticmethod
    def to_response(accountants: list[AccountantWithTotals]) -> AccountantListResponse:
        return AccountantListResponse(
            accountants=[profile_to_response(a.profile, a) for a in accountants],
            count=len(accountants),
        )


class RegisterAccountantUseCase(_AccountantUseCaseBase):
    """Give an identity-provider user a profile and the accountant role."""

    async def execute(
        self,
        request: RegisterAccountantRequest,
        caller: CallerContext,
    ) -> AccountantProfile:
        require_admin(caller, "register_accountant")
        profile = await (await self._get_accountant_store()).create_profile(
            AccountantProfile(
                user_id=request.user_id.strip(),
                full_name=request.full_name.strip(),
                email=request.email.strip(),
                phone=request.phone,
                role=Role.ACCOUNTANT,
            )
        )
        logger.info("accountant_registered", user_id=profile.user_id, by=caller.user_id)
        return profile


class RemoveAccountantUseCase(_AccountantUseCaseBase):
    """Remove an accountant's profile and role; their invoices stay."""

    async def execute(self, user_id: str, caller: CallerContext) -> None:
        require_admin(caller, "remove_accountant")
        store = await self._get_accountant_store()
        profile = await store.get_profile(user_id)
        if profile is None or profile.role != Role.ACCOUNTANT:
            raise AccountantNotFoundError(user_id)
        await store.delete_profile(user_id)
        logger.info("accountant_removed", user_id=user_id, by=caller.user_id)


class SetupAdminUseCase(_AccountantUseCaseBase):
    """Register the first administrator while none exists."""

    async def status(self) -> SetupStatusResponse:
        admins = await (await self._get_accountant_store()).count_profiles(Role.ADMIN)
        return SetupStatusResponse(needs_setup=admins == 0, admin_count=admins)

    async def execute(self, user_id: str, request: SetupAdminRequest) -> AccountantProfile:
        store = await self._get_accountant_store()
        if await store.count_profiles(Role.ADMIN) > 0:
            raise SetupAlreadyCompletedError()

        profile = await store.create_profile(
            AccountantProfile(
                user_id=user_id,
                full_name=request.full_name.strip(),
                email=request.email.strip(),
                phone=request.phone,
                role=Role.ADMIN,
            )
        )
        logger.info("admin_bootstrapped", user_id=user_id)
        return profile
