"""Tests for SQLite invoice store."""

import re
from datetime import date
from decimal import Decimal

import aiosqlite
import pytest

from src.core.entities import (
    Customer,
    Invoice,
    InvoiceFilter,
    InvoiceLineItem,
    InvoiceStatus,
    InvoiceType,
)
from src.infrastructure.storage.sqlite import SQLiteCustomerStore, SQLiteInvoiceStore
from src.infrastructure.storage.sqlite.invoice_store import parse_day, parse_money

NUMBER_RE = re.compile(r"^INV-\d{6}-\d{6}$")


@pytest.fixture
def store(ledger_db) -> SQLiteInvoiceStore:
    return SQLiteInvoiceStore()


def _draft(
    owner_id: str = "acct-1",
    invoice_type: InvoiceType = InvoiceType.SALE,
    invoice_date: date | None = date(2026, 3, 10),
    customer_id: int | None = None,
) -> Invoice:
    return Invoice(
        invoice_type=invoice_type,
        owner_id=owner_id,
        customer_id=customer_id,
        tax_rate=Decimal("15"),
        invoice_date=invoice_date,
        items=[
            InvoiceLineItem(description="Widget", quantity=Decimal("2"), unit_price=Decimal("50")),
            InvoiceLineItem(description="Install", quantity=Decimal("1"), unit_price=Decimal("130")),
        ],
    )


async def _persist(store: SQLiteInvoiceStore, draft: Invoice) -> Invoice:
    items = draft.items
    invoice = await store.create_invoice(draft)
    await store.create_line_items(invoice.id, items)
    return invoice


class TestCreateInvoice:
    async def test_assigns_id_and_number(self, store):
        invoice = await store.create_invoice(_draft())

        assert invoice.id is not None
        assert invoice.invoice_number == "INV-202603-000001"

    async def test_numbers_unique_and_increasing(self, store):
        numbers = [(await store.create_invoice(_draft())).invoice_number for _ in range(5)]

        assert len(set(numbers)) == 5
        assert all(NUMBER_RE.match(n) for n in numbers)
        assert [int(n.rsplit("-", 1)[1]) for n in numbers] == [1, 2, 3, 4, 5]

    async def test_sequence_global_across_months(self, store):
        first = await store.create_invoice(_draft(invoice_date=date(2026, 1, 31)))
        second = await store.create_invoice(_draft(invoice_date=date(2026, 2, 1)))

        assert first.invoice_number == "INV-202601-000001"
        assert second.invoice_number == "INV-202602-000002"

    async def test_money_round_trips_exactly(self, store):
        invoice = await _persist(store, _draft())
        loaded = await store.get_invoice(invoice.id)

        assert loaded.subtotal == Decimal("230")
        assert loaded.tax_amount == Decimal("34.5")
        assert loaded.total_amount == Decimal("264.5")
        assert loaded.tax_rate == Decimal("15")


class TestLineItems:
    async def test_items_in_insertion_order(self, store):
        invoice = await _persist(store, _draft())
        loaded = await store.get_invoice(invoice.id)

        assert [item.description for item in loaded.items] == ["Widget", "Install"]
        assert [item.position for item in loaded.items] == [0, 1]
        assert loaded.items[0].extended_price == Decimal("100")

    async def test_list_line_items(self, store):
        invoice = await _persist(store, _draft())
        items = await store.list_line_items(invoice.id)
        assert len(items) == 2
        assert all(item.invoice_id == invoice.id for item in items)

    async def test_items_require_existing_header(self, store):
        with pytest.raises(aiosqlite.IntegrityError):
            await store.create_line_items(
                999,
                [InvoiceLineItem(description="x", quantity=Decimal("1"), unit_price=Decimal("1"))],
            )


class TestGetInvoice:
    async def test_missing(self, store):
        assert await store.get_invoice(12345) is None

    async def test_joins_customer(self, store):
        customer = await SQLiteCustomerStore().create_customer(Customer(name="Acme", phone="0500"))
        invoice = await _persist(store, _draft(customer_id=customer.id))

        loaded = await store.get_invoice(invoice.id)
        assert loaded.customer is not None
        assert loaded.customer.name == "Acme"

    async def test_customer_delete_keeps_invoice(self, store):
        customers = SQLiteCustomerStore()
        customer = await customers.create_customer(Customer(name="Gone Ltd"))
        invoice = await _persist(store, _draft(customer_id=customer.id))

        assert await customers.delete_customer(customer.id)
        loaded = await store.get_invoice(invoice.id)
        assert loaded is not None
        assert loaded.customer_id is None
        assert loaded.customer is None


class TestListInvoices:
    async def test_owner_and_type_filters(self, store):
        await store.create_invoice(_draft(owner_id="a"))
        await store.create_invoice(_draft(owner_id="a", invoice_type=InvoiceType.PURCHASE))
        await store.create_invoice(_draft(owner_id="b"))

        assert len(await store.list_invoices(InvoiceFilter())) == 3
        assert len(await store.list_invoices(InvoiceFilter(owner_id="a"))) == 2
        sales_a = await store.list_invoices(
            InvoiceFilter(owner_id="a", invoice_type=InvoiceType.SALE)
        )
        assert len(sales_a) == 1
        assert sales_a[0].owner_id == "a"

    async def test_newest_first(self, store):
        first = await store.create_invoice(_draft())
        second = await store.create_invoice(_draft())

        listed = await store.list_invoices(InvoiceFilter())
        assert [inv.id for inv in listed] == [second.id, first.id]

    async def test_date_range(self, store):
        for day in (date(2026, 1, 1), date(2026, 1, 31), date(2026, 2, 1)):
            await store.create_invoice(_draft(invoice_date=day))

        listed = await store.list_invoices(
            InvoiceFilter(start_date=date(2026, 1, 1), end_date=date(2026, 1, 31))
        )
        assert sorted(inv.invoice_date for inv in listed) == [date(2026, 1, 1), date(2026, 1, 31)]

    async def test_date_range_with_undated(self, store):
        await store.create_invoice(_draft(invoice_date=date(2026, 1, 15)))
        await store.create_invoice(_draft(invoice_date=date(2026, 2, 15)))
        await store.create_invoice(_draft(invoice_date=None))
        window = {"start_date": date(2026, 1, 1), "end_date": date(2026, 1, 31)}

        strict = await store.list_invoices(InvoiceFilter(**window))
        assert [inv.invoice_date for inv in strict] == [date(2026, 1, 15)]

        loose = await store.list_invoices(InvoiceFilter(**window, include_undated=True))
        assert sorted(str(inv.invoice_date) for inv in loose) == ["2026-01-15", "None"]

    async def test_pagination(self, store):
        for _ in range(5):
            await store.create_invoice(_draft())

        page = await store.list_invoices(InvoiceFilter(limit=2, offset=2))
        assert len(page) == 2
        assert len(await store.list_invoices(InvoiceFilter(offset=4))) == 1

    async def test_headers_carry_totals(self, store):
        await _persist(store, _draft())
        listed = await store.list_invoices(InvoiceFilter())
        assert listed[0].total_amount == Decimal("264.5")
        assert listed[0].items == []


class TestStatusAndFlags:
    async def test_update_status(self, store):
        invoice = await store.create_invoice(_draft())

        assert await store.update_status(invoice.id, InvoiceStatus.PAID)
        assert (await store.get_invoice(invoice.id)).status == InvoiceStatus.PAID

    async def test_update_status_missing(self, store):
        assert not await store.update_status(999, InvoiceStatus.PAID)

    async def test_mark_incomplete(self, store):
        invoice = await store.create_invoice(_draft())
        await store.mark_incomplete(invoice.id)

        loaded = await store.get_invoice(invoice.id)
        assert loaded.is_incomplete is True
        assert loaded.items == []
        assert loaded.subtotal == Decimal("230")
        assert loaded.total_amount == Decimal("264.5")


class TestParsing:
    def test_parse_day(self):
        assert parse_day("2026-03-10") == date(2026, 3, 10)
        assert parse_day("2026-03-10T08:00:00") == date(2026, 3, 10)
        assert parse_day("not a date") is None
        assert parse_day(None) is None

    def test_parse_money(self):
        assert parse_money("264.50") == Decimal("264.50")
        assert parse_money(None) == Decimal("0")
        assert parse_money("garbage") == Decimal("0")
