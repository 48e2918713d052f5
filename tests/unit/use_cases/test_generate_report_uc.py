"""Tests for GenerateReportUseCase and GetDashboardStatsUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from src.application.dto.requests import ReportRequest
from src.application.use_cases import GenerateReportUseCase, GetDashboardStatsUseCase
from src.core.entities import (
    AccountantProfile,
    InvoiceType,
    ReportPeriod,
    Role,
    TypeFilter,
)

TODAY = date(2026, 1, 20)


@pytest.fixture
def mock_invoice_store():
    return AsyncMock()


@pytest.fixture
def mock_accountant_store():
    store = AsyncMock()
    store.list_profiles.return_value = [
        AccountantProfile(user_id="acct-1", full_name="Sara Ali", email="s@x.io"),
    ]
    return store


@pytest.fixture
def use_case(mock_invoice_store, mock_accountant_store):
    return GenerateReportUseCase(
        invoice_store=mock_invoice_store,
        accountant_store=mock_accountant_store,
    )


class TestGenerateReportUseCase:
    async def test_monthly_report(self, use_case, mock_invoice_store, admin_caller, make_invoice):
        mock_invoice_store.list_invoices.return_value = [
            make_invoice(100, InvoiceType.SALE, invoice_date=date(2026, 1, 5), invoice_id=1),
            make_invoice(200, InvoiceType.SALE, invoice_date=date(2026, 1, 20), invoice_id=2),
            make_invoice(120, InvoiceType.PURCHASE, invoice_date=date(2026, 1, 9), invoice_id=3),
            make_invoice(999, InvoiceType.SALE, invoice_date=date(2025, 12, 31), invoice_id=4),
        ]

        result = await use_case.execute(ReportRequest(), admin_caller, today=TODAY)

        assert result.summary.total_sales == Decimal("300")
        assert result.summary.total_purchases == Decimal("120")
        assert result.summary.net_profit == Decimal("180")
        assert result.accountant_names == {"acct-1": "Sara Ali"}

    async def test_accountant_sees_only_own(
        self, use_case, mock_invoice_store, accountant_caller
    ):
        mock_invoice_store.list_invoices.return_value = []
        await use_case.execute(ReportRequest(), accountant_caller, today=TODAY)

        flt = mock_invoice_store.list_invoices.call_args.args[0]
        assert flt.owner_id == "acct-1"

    async def test_admin_not_filtered(self, use_case, mock_invoice_store, admin_caller):
        mock_invoice_store.list_invoices.return_value = []
        await use_case.execute(ReportRequest(), admin_caller, today=TODAY)
        assert mock_invoice_store.list_invoices.call_args.args[0].owner_id is None

    async def test_type_filter_pushed_down(self, use_case, mock_invoice_store, admin_caller):
        mock_invoice_store.list_invoices.return_value = []
        await use_case.execute(
            ReportRequest(type_filter=TypeFilter.PURCHASE), admin_caller, today=TODAY
        )
        flt = mock_invoice_store.list_invoices.call_args.args[0]
        assert flt.invoice_type == InvoiceType.PURCHASE

    async def test_window_pushed_down(self, use_case, mock_invoice_store, admin_caller):
        mock_invoice_store.list_invoices.return_value = []
        await use_case.execute(ReportRequest(), admin_caller, today=TODAY)

        flt = mock_invoice_store.list_invoices.call_args.args[0]
        assert flt.start_date == date(2026, 1, 1)
        assert flt.end_date == date(2026, 1, 31)
        assert flt.include_undated is True

    async def test_unknown_accountant_label(
        self, use_case, mock_invoice_store, admin_caller, make_invoice
    ):
        mock_invoice_store.list_invoices.return_value = [
            make_invoice(10, owner_id="ghost", invoice_date=date(2026, 1, 2))
        ]
        result = await use_case.execute(ReportRequest(), admin_caller, today=TODAY)
        assert result.accountant_names == {"ghost": "Unknown"}

    async def test_inverted_window_skips_store(
        self, use_case, mock_invoice_store, admin_caller
    ):
        request = ReportRequest(
            period=ReportPeriod.CUSTOM, start=date(2026, 3, 1), end=date(2026, 1, 1)
        )
        result = await use_case.execute(request, admin_caller, today=TODAY)

        assert result.summary.invoice_count == 0
        mock_invoice_store.list_invoices.assert_not_called()

    async def test_to_response(self, use_case, mock_invoice_store, admin_caller, make_invoice):
        mock_invoice_store.list_invoices.return_value = [
            make_invoice("10.005", invoice_date=date(2026, 1, 2)),
        ]
        result = await use_case.execute(ReportRequest(), admin_caller, today=TODAY)
        response = GenerateReportUseCase.to_response(result)

        assert response.period == "month"
        assert response.start == date(2026, 1, 1)
        assert response.total_sales == Decimal("10.01")
        assert response.by_month[0].month == "2026-01"
        assert response.by_month[0].label == "Jan 2026"
        assert response.by_accountant[0].name == "Sara Ali"


class TestGetDashboardStatsUseCase:
    async def test_all_time_scoped(
        self, mock_invoice_store, mock_accountant_store, accountant_caller, make_invoice
    ):
        mock_invoice_store.list_invoices.return_value = [
            make_invoice(100, InvoiceType.SALE, invoice_id=1),
            make_invoice(30, InvoiceType.PURCHASE, invoice_id=2),
        ]
        mock_accountant_store.count_profiles.return_value = 4
        use_case = GetDashboardStatsUseCase(mock_invoice_store, mock_accountant_store)

        stats = await use_case.execute(accountant_caller)

        assert mock_invoice_store.list_invoices.call_args.args[0].owner_id == "acct-1"
        mock_accountant_store.count_profiles.assert_awaited_once_with(Role.ACCOUNTANT)
        response = use_case.to_response(stats)
        assert response.net_profit == Decimal("70.00")
        assert response.invoice_count == 2
        assert response.accountant_count == 4
