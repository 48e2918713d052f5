"""SQLite implementation of customer storage."""

from datetime import UTC, datetime

import aiosqlite

from src.config import get_logger
from src.core.entities import Customer
from src.core.exceptions import CustomerNotFoundError
from src.core.interfaces import ICustomerStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from src.infrastructure.storage.sqlite.invoice_store import parse_timestamp

logger = get_logger(__name__)


class SQLiteCustomerStore(ICustomerStore):
    """SQLite implementation of customer storage."""

    async def create_customer(self, customer: Customer) -> Customer:
        now = datetime.now(UTC)
        customer.created_at = now
        customer.updated_at = now
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO customers (
                    name, phone, email, address, created_by, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    customer.name,
                    customer.phone,
                    customer.email,
                    customer.address,
                    customer.created_by,
                    customer.created_at.isoformat(),
                    customer.updated_at.isoformat(),
                ),
            )
            customer.id = cursor.lastrowid

        logger.info("customer_created", customer_id=customer.id, created_by=customer.created_by)
        return customer

    async def get_customer(self, customer_id: int) -> Customer | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM customers WHERE id = ?",
                (customer_id,),
            )
            row = await cursor.fetchone()
            return self._row_to_customer(row) if row else None

    async def list_customers(self, limit: int = 100, offset: int = 0) -> list[Customer]:
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM customers
                ORDER BY created_at DESC, id DESC
                LIMIT ? OFFSET ?
                """,
                (limit, offset),
            )
            rows = await cursor.fetchall()
            return [self._row_to_customer(r) for r in rows]

    async def update_customer(self, customer: Customer) -> Customer:
        """Overwrite the editable fields of an existing customer."""
        if customer.id is None:
            raise CustomerNotFoundError(None)

        customer.updated_at = datetime.now(UTC)
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE customers
                SET name = ?, phone = ?, email = ?, address = ?, updated_at = ?
                WHERE id = ?
                """,
                (
                    customer.name,
                    customer.phone,
                    customer.email,
                    customer.address,
                    customer.updated_at.isoformat(),
                    customer.id,
                ),
            )
            if cursor.rowcount == 0:
                raise CustomerNotFoundError(customer.id)

        logger.info("customer_updated", customer_id=customer.id)
        return customer

    async def delete_customer(self, customer_id: int) -> bool:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM customers WHERE id = ?",
                (customer_id,),
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("customer_deleted", customer_id=customer_id)
        return deleted

    @staticmethod
    def _row_to_customer(row: aiosqlite.Row) -> Customer:
        return Customer(
            id=row["id"],
            name=row["name"],
            phone=row["phone"],
            email=row["email"],
            address=row["address"],
            created_by=row["created_by"],
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )
