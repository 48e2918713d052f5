"""Tests for SQLite customer store."""

import pytest

from src.core.entities import Customer
from src.core.exceptions import CustomerNotFoundError
from src.infrastructure.storage.sqlite import SQLiteCustomerStore


@pytest.fixture
def store(ledger_db) -> SQLiteCustomerStore:
    return SQLiteCustomerStore()


class TestCustomerStore:
    async def test_create_and_get(self, store):
        created = await store.create_customer(
            Customer(name="Acme", email="a@acme.io", created_by="acct-1")
        )
        loaded = await store.get_customer(created.id)

        assert loaded.name == "Acme"
        assert loaded.email == "a@acme.io"
        assert loaded.phone is None
        assert loaded.created_by == "acct-1"

    async def test_get_missing(self, store):
        assert await store.get_customer(404) is None

    async def test_list_newest_first(self, store):
        first = await store.create_customer(Customer(name="First"))
        second = await store.create_customer(Customer(name="Second"))

        listed = await store.list_customers()
        assert [c.id for c in listed] == [second.id, first.id]
        assert len(await store.list_customers(limit=1)) == 1

    async def test_update(self, store):
        customer = await store.create_customer(Customer(name="Old"))
        customer.name = "New"
        customer.address = "Riyadh"
        await store.update_customer(customer)

        loaded = await store.get_customer(customer.id)
        assert loaded.name == "New"
        assert loaded.address == "Riyadh"

    async def test_update_missing(self, store):
        with pytest.raises(CustomerNotFoundError):
            await store.update_customer(Customer(id=404, name="Nobody"))

    async def test_delete(self, store):
        customer = await store.create_customer(Customer(name="Temp"))
        assert await store.delete_customer(customer.id)
        assert not await store.delete_customer(customer.id)
        assert await store.get_customer(customer.id) is None
