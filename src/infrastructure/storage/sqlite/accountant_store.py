"""SQLite implementation of staff profile and role storage."""

from datetime import UTC, datetime

import aiosqlite

from src.config import get_logger
from src.core.entities import AccountantProfile, Role
from src.core.exceptions import DuplicateAccountantError
from src.core.interfaces import IAccountantStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from src.infrastructure.storage.sqlite.invoice_store import parse_timestamp

logger = get_logger(__name__)


class SQLiteAccountantStore(IAccountantStore):
    """Profiles and roles share one table keyed by the external user id."""

    async def create_profile(self, profile: AccountantProfile) -> AccountantProfile:
        now = datetime.now(UTC)
        profile.created_at = now
        profile.updated_at = now
        try:
            async with get_transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO accountant_profiles (
                        user_id, full_name, email, phone, role, created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        profile.user_id,
                        profile.full_name,
                        profile.email,
                        profile.phone,
                        profile.role.value,
                        profile.created_at.isoformat(),
                        profile.updated_at.isoformat(),
                    ),
                )
        except aiosqlite.IntegrityError as e:
            raise DuplicateAccountantError(profile.user_id) from e

        logger.info("profile_created", user_id=profile.user_id, role=profile.role.value)
        return profile

    async def get_profile(self, user_id: str) -> AccountantProfile | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM accountant_profiles WHERE user_id = ?",
                (user_id,),
            )
            row = await cursor.fetchone()
            return self._row_to_profile(row) if row else None

    async def get_role(self, user_id: str) -> Role | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT role FROM accountant_profiles WHERE user_id = ?",
                (user_id,),
            )
            row = await cursor.fetchone()
            return Role(row["role"]) if row else None

    async def list_profiles(self, role: Role | None = None) -> list[AccountantProfile]:
        query = "SELECT * FROM accountant_profiles"
        params: tuple = ()
        if role is not None:
            query += " WHERE role = ?"
            params = (role.value,)
        query += " ORDER BY created_at DESC, user_id"

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            return [self._row_to_profile(r) for r in rows]

    async def count_profiles(self, role: Role | None = None) -> int:
        query = "SELECT COUNT(*) FROM accountant_profiles"
        params: tuple = ()
        if role is not None:
            query += " WHERE role = ?"
            params = (role.value,)

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            row = await cursor.fetchone()
            return row[0] if row else 0

    async def delete_profile(self, user_id: str) -> bool:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM accountant_profiles WHERE user_id = ?",
                (user_id,),
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("profile_deleted", user_id=user_id)
        return deleted

    @staticmethod
    def _row_to_profile(row: aiosqlite.Row) -> AccountantProfile:
        return AccountantProfile(
            user_id=row["user_id"],
            full_name=row["full_name"],
            email=row["email"],
            phone=row["phone"],
            role=Role(row["role"]),
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )
