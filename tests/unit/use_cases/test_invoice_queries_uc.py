"""Tests for the invoice read and status use cases."""

from unittest.mock import AsyncMock

import pytest

from src.application.use_cases import (
    GetInvoiceUseCase,
    ListInvoicesUseCase,
    UpdateInvoiceStatusUseCase,
)
from src.core.entities import InvoiceStatus, InvoiceType
from src.core.exceptions import InvoiceNotFoundError


@pytest.fixture
def mock_invoice_store():
    return AsyncMock()


class TestGetInvoiceUseCase:
    async def test_owner_sees_invoice(self, mock_invoice_store, accountant_caller, make_invoice):
        mock_invoice_store.get_invoice.return_value = make_invoice(owner_id="acct-1")
        invoice = await GetInvoiceUseCase(mock_invoice_store).execute(1, accountant_caller)
        assert invoice.id == 1

    async def test_admin_sees_any(self, mock_invoice_store, admin_caller, make_invoice):
        mock_invoice_store.get_invoice.return_value = make_invoice(owner_id="someone")
        invoice = await GetInvoiceUseCase(mock_invoice_store).execute(1, admin_caller)
        assert invoice.owner_id == "someone"

    async def test_other_accountant_gets_not_found(
        self, mock_invoice_store, other_accountant_caller, make_invoice
    ):
        mock_invoice_store.get_invoice.return_value = make_invoice(owner_id="acct-1")
        with pytest.raises(InvoiceNotFoundError):
            await GetInvoiceUseCase(mock_invoice_store).execute(1, other_accountant_caller)

    async def test_missing(self, mock_invoice_store, admin_caller):
        mock_invoice_store.get_invoice.return_value = None
        with pytest.raises(InvoiceNotFoundError):
            await GetInvoiceUseCase(mock_invoice_store).execute(404, admin_caller)


class TestListInvoicesUseCase:
    async def test_accountant_filter(self, mock_invoice_store, accountant_caller):
        mock_invoice_store.list_invoices.return_value = []
        await ListInvoicesUseCase(mock_invoice_store).execute(
            accountant_caller, InvoiceType.PURCHASE, limit=10, offset=20
        )

        flt = mock_invoice_store.list_invoices.call_args.args[0]
        assert flt.owner_id == "acct-1"
        assert flt.invoice_type == InvoiceType.PURCHASE
        assert (flt.limit, flt.offset) == (10, 20)

    async def test_admin_unfiltered(self, mock_invoice_store, admin_caller, make_invoice):
        mock_invoice_store.list_invoices.return_value = [make_invoice(invoice_id=2)]
        invoices = await ListInvoicesUseCase(mock_invoice_store).execute(admin_caller)

        assert mock_invoice_store.list_invoices.call_args.args[0].owner_id is None
        response = ListInvoicesUseCase.to_response(invoices, 50, 0)
        assert response.count == 1
        assert response.invoices[0].invoice_number == "INV-202603-000002"


class TestUpdateInvoiceStatusUseCase:
    async def test_pending_paid_cancelled(self, mock_invoice_store, accountant_caller, make_invoice):
        invoice = make_invoice(status=InvoiceStatus.PENDING)
        mock_invoice_store.get_invoice.return_value = invoice
        mock_invoice_store.update_status.return_value = True
        use_case = UpdateInvoiceStatusUseCase(mock_invoice_store)

        result = await use_case.execute(1, InvoiceStatus.PAID, accountant_caller)
        assert result.previous_status == InvoiceStatus.PENDING
        assert result.status == InvoiceStatus.PAID

        result = await use_case.execute(1, InvoiceStatus.CANCELLED, accountant_caller)
        assert result.previous_status == InvoiceStatus.PAID
        assert result.status == InvoiceStatus.CANCELLED
        mock_invoice_store.update_status.assert_awaited_with(1, InvoiceStatus.CANCELLED)

    async def test_hidden_invoice_not_updated(
        self, mock_invoice_store, other_accountant_caller, make_invoice
    ):
        mock_invoice_store.get_invoice.return_value = make_invoice(owner_id="acct-1")

        with pytest.raises(InvoiceNotFoundError):
            await UpdateInvoiceStatusUseCase(mock_invoice_store).execute(
                1, InvoiceStatus.PAID, other_accountant_caller
            )
        mock_invoice_store.update_status.assert_not_called()

    async def test_row_vanished(self, mock_invoice_store, admin_caller, make_invoice):
        mock_invoice_store.get_invoice.return_value = make_invoice()
        mock_invoice_store.update_status.return_value = False

        with pytest.raises(InvoiceNotFoundError):
            await UpdateInvoiceStatusUseCase(mock_invoice_store).execute(
                1, InvoiceStatus.PAID, admin_caller
            )

    def test_to_response(self):
        from src.application.use_cases.update_invoice_status import StatusChangeResult

        response = UpdateInvoiceStatusUseCase.to_response(
            StatusChangeResult(1, InvoiceStatus.PENDING, InvoiceStatus.PAID)
        )
        assert (response.previous_status, response.status) == ("pending", "paid")
