"""Tests for SQLite accountant profile store."""

import pytest

from src.core.entities import AccountantProfile, Role
from src.core.exceptions import DuplicateAccountantError
from src.infrastructure.storage.sqlite import SQLiteAccountantStore


@pytest.fixture
def store(ledger_db) -> SQLiteAccountantStore:
    return SQLiteAccountantStore()


def _profile(user_id: str, role: Role = Role.ACCOUNTANT) -> AccountantProfile:
    return AccountantProfile(
        user_id=user_id, full_name=f"User {user_id}", email=f"{user_id}@x.io", role=role
    )


class TestAccountantStore:
    async def test_create_and_get(self, store):
        await store.create_profile(_profile("u-1"))
        loaded = await store.get_profile("u-1")

        assert loaded.full_name == "User u-1"
        assert loaded.role == Role.ACCOUNTANT

    async def test_duplicate_user(self, store):
        await store.create_profile(_profile("u-1"))
        with pytest.raises(DuplicateAccountantError):
            await store.create_profile(_profile("u-1", Role.ADMIN))

    async def test_get_role(self, store):
        await store.create_profile(_profile("boss", Role.ADMIN))
        assert await store.get_role("boss") == Role.ADMIN
        assert await store.get_role("stranger") is None

    async def test_list_and_count_by_role(self, store):
        await store.create_profile(_profile("boss", Role.ADMIN))
        await store.create_profile(_profile("u-1"))
        await store.create_profile(_profile("u-2"))

        accountants = await store.list_profiles(Role.ACCOUNTANT)
        assert {p.user_id for p in accountants} == {"u-1", "u-2"}
        assert len(await store.list_profiles()) == 3
        assert await store.count_profiles(Role.ADMIN) == 1
        assert await store.count_profiles() == 3

    async def test_delete(self, store):
        await store.create_profile(_profile("u-1"))
        assert await store.delete_profile("u-1")
        assert not await store.delete_profile("u-1")
        assert await store.get_role("u-1") is None
