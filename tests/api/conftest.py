"""Fixtures for API tests: real use cases wired to mocked stores."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.api import dependencies as deps
from src.api.main import app
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
)
from src.core.entities import Role

ROLES = {"admin-1": Role.ADMIN, "acct-1": Role.ACCOUNTANT, "acct-2": Role.ACCOUNTANT}


@pytest.fixture
def mock_invoice_store():
    return AsyncMock()


@pytest.fixture
def mock_customer_store():
    return AsyncMock()


@pytest.fixture
def mock_accountant_store():
    store = AsyncMock()
    store.get_role.side_effect = lambda user_id: ROLES.get(user_id)
    store.create_profile.side_effect = lambda profile: profile
    store.list_profiles.return_value = []
    store.count_profiles.return_value = 0
    return store


@pytest.fixture
async def client(
    mock_invoice_store, mock_customer_store, mock_accountant_store
) -> AsyncGenerator[AsyncClient, None]:
    inv, cust, acct = mock_invoice_store, mock_customer_store, mock_accountant_store
    report = GenerateReportUseCase(invoice_store=inv, accountant_store=acct)

    app.dependency_overrides.update({
        deps.get_inv_store: lambda: inv,
        deps.get_cust_store: lambda: cust,
        deps.get_acct_store: lambda: acct,
        deps.get_create_invoice_use_case: lambda: CreateInvoiceUseCase(inv, cust),
        deps.get_get_invoice_use_case: lambda: GetInvoiceUseCase(inv),
        deps.get_list_invoices_use_case: lambda: ListInvoicesUseCase(inv),
        deps.get_update_status_use_case: lambda: UpdateInvoiceStatusUseCase(inv),
        deps.get_invoice_pdf_use_case: lambda: CreateInvoicePdfUseCase(inv),
        deps.get_report_use_case: lambda: report,
        deps.get_report_pdf_use_case: lambda: CreateReportPdfUseCase(report),
        deps.get_dashboard_use_case: lambda: GetDashboardStatsUseCase(inv, acct),
        deps.get_list_accountants_use_case: lambda: ListAccountantsUseCase(acct, inv),
        deps.get_register_accountant_use_case: lambda: RegisterAccountantUseCase(acct),
        deps.get_remove_accountant_use_case: lambda: RemoveAccountantUseCase(acct),
        deps.get_setup_admin_use_case: lambda: SetupAdminUseCase(acct),
    })
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
