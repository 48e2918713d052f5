"""
SQLite implementation of invoice storage.

Invoice numbers come from the ``invoice_counters`` row, bumped inside the
same write transaction that inserts the header.
"""

from datetime import UTC, date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

import aiosqlite

from src.config import get_logger, get_settings
from src.core.entities import (
    Customer,
    Invoice,
    InvoiceFilter,
    InvoiceLineItem,
    InvoiceStatus,
    InvoiceType,
)
from src.core.interfaces import IInvoiceStore
from src.core.pricing import ZERO
from src.core.services.invoice_numbering import InvoiceNumberGenerator
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)

COUNTER_NAME = "invoice"

_HEADER_COLUMNS = """
    i.id, i.invoice_number, i.invoice_type, i.customer_id, i.owner_id,
    i.tax_rate, i.subtotal, i.tax_amount, i.total_amount, i.status,
    i.invoice_date, i.notes, i.is_incomplete, i.created_at, i.updated_at,
    c.name AS customer_name, c.phone AS customer_phone,
    c.email AS customer_email, c.address AS customer_address
"""


def parse_day(value: Any) -> date | None:
    """Parse a stored ISO date; malformed or empty values read as missing."""
    if not value:
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def parse_timestamp(value: Any) -> datetime:
    """Parse a stored timestamp, falling back to now."""
    if value:
        try:
            parsed = datetime.fromisoformat(str(value))
            return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
        except ValueError:
            pass
    return datetime.now(UTC)


def parse_money(value: Any) -> Decimal:
    """Read a TEXT money column back into an exact Decimal."""
    if value is None or value == "":
        return ZERO
    try:
        return Decimal(str(value))
    except InvalidOperation:
        logger.warning("malformed_money_value", value=str(value))
        return ZERO


class SQLiteInvoiceStore(IInvoiceStore):
    """SQLite implementation of invoice storage."""

    async def create_invoice(self, invoice: Invoice) -> Invoice:
        """Insert the header and assign its number. Items are not written."""
        generator = InvoiceNumberGenerator(get_settings().invoice.number_prefix)
        now = datetime.now(UTC)
        invoice.created_at = now
        invoice.updated_at = now

        async with get_transaction() as conn:
            await conn.execute(
                "UPDATE invoice_counters SET value = value + 1 WHERE name = ?",
                (COUNTER_NAME,),
            )
            cursor = await conn.execute(
                "SELECT value FROM invoice_counters WHERE name = ?",
                (COUNTER_NAME,),
            )
            row = await cursor.fetchone()
            if row is None:
                await conn.execute(
                    "INSERT INTO invoice_counters (name, value) VALUES (?, 1)",
                    (COUNTER_NAME,),
                )
                sequence = 1
            else:
                sequence = row[0]

            invoice.invoice_number = generator.format(
                sequence, invoice.invoice_date or now.date()
            )

            cursor = await conn.execute(
                """
                INSERT INTO invoices (
                    invoice_number, invoice_type, customer_id, owner_id,
                    tax_rate, subtotal, tax_amount, total_amount, status,
                    invoice_date, notes, is_incomplete, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    invoice.invoice_number,
                    invoice.invoice_type.value,
                    invoice.customer_id,
                    invoice.owner_id,
                    invoice.tax_rate,
                    invoice.subtotal,
                    invoice.tax_amount,
                    invoice.total_amount,
                    invoice.status.value,
                    invoice.invoice_date.isoformat() if invoice.invoice_date else None,
                    invoice.notes,
                    int(invoice.is_incomplete),
                    invoice.created_at.isoformat(),
                    invoice.updated_at.isoformat(),
                ),
            )
            invoice.id = cursor.lastrowid

        logger.info(
            "invoice_header_created",
            invoice_id=invoice.id,
            invoice_number=invoice.invoice_number,
            invoice_type=invoice.invoice_type.value,
            owner_id=invoice.owner_id,
        )
        return invoice

    async def create_line_items(
        self,
        invoice_id: int,
        items: list[InvoiceLineItem],
    ) -> list[InvoiceLineItem]:
        """Insert every item in one transaction, keeping list order."""
        now = datetime.now(UTC)
        async with get_transaction() as conn:
            for position, item in enumerate(items):
                item.invoice_id = invoice_id
                item.position = position
                item.created_at = now
                cursor = await conn.execute(
                    """
                    INSERT INTO invoice_items (
                        invoice_id, position, description, quantity,
                        unit_price, extended_price, created_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        invoice_id,
                        position,
                        item.description,
                        item.quantity,
                        item.unit_price,
                        item.extended_price,
                        now.isoformat(),
                    ),
                )
                item.id = cursor.lastrowid

        logger.debug("invoice_items_created", invoice_id=invoice_id, count=len(items))
        return items

    async def get_invoice(self, invoice_id: int) -> Invoice | None:
        """Get an invoice with its customer and items."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                f"""
                SELECT {_HEADER_COLUMNS}
                FROM invoices i
                LEFT JOIN customers c ON c.id = i.customer_id
                WHERE i.id = ?
                """,
                (invoice_id,),
            )
            row = await cursor.fetchone()
            if row is None:
                return None

            items = await self._fetch_items(conn, invoice_id)

        return self._row_to_invoice(row, items)

    async def list_invoices(self, invoice_filter: InvoiceFilter) -> list[Invoice]:
        """List headers matching the filter, newest first."""
        conditions: list[str] = []
        params: list[Any] = []

        if invoice_filter.owner_id is not None:
            conditions.append("i.owner_id = ?")
            params.append(invoice_filter.owner_id)
        if invoice_filter.invoice_type is not None:
            conditions.append("i.invoice_type = ?")
            params.append(invoice_filter.invoice_type.value)
        date_conditions: list[str] = []
        if invoice_filter.start_date is not None:
            date_conditions.append("i.invoice_date >= ?")
            params.append(invoice_filter.start_date.isoformat())
        if invoice_filter.end_date is not None:
            date_conditions.append("substr(i.invoice_date, 1, 10) <= ?")
            params.append(invoice_filter.end_date.isoformat())
        if date_conditions:
            in_range = " AND ".join(date_conditions)
            if invoice_filter.include_undated:
                conditions.append(f"(({in_range}) OR i.invoice_date IS NULL)")
            else:
                conditions.append(in_range)

        query = f"""
            SELECT {_HEADER_COLUMNS}
            FROM invoices i
            LEFT JOIN customers c ON c.id = i.customer_id
        """
        if conditions:
            query += " WHERE " + " AND ".join(conditions)
        query += " ORDER BY i.created_at DESC, i.id DESC"

        if invoice_filter.limit is not None:
            query += " LIMIT ? OFFSET ?"
            params.extend([invoice_filter.limit, invoice_filter.offset])
        elif invoice_filter.offset:
            query += " LIMIT -1 OFFSET ?"
            params.append(invoice_filter.offset)

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()

        return [self._row_to_invoice(row, []) for row in rows]

    async def list_line_items(self, invoice_id: int) -> list[InvoiceLineItem]:
        """Get items of an invoice in insertion order."""
        async with get_connection() as conn:
            return await self._fetch_items(conn, invoice_id)

    async def update_status(self, invoice_id: int, status: InvoiceStatus) -> bool:
        """Set the status of an invoice."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "UPDATE invoices SET status = ?, updated_at = ? WHERE id = ?",
                (status.value, datetime.now(UTC).isoformat(), invoice_id),
            )
            updated = cursor.rowcount > 0

        if updated:
            logger.info("invoice_status_updated", invoice_id=invoice_id, status=status.value)
        return updated

    async def mark_incomplete(self, invoice_id: int) -> None:
        """Flag a header whose items never made it to disk."""
        async with get_transaction() as conn:
            await conn.execute(
                "UPDATE invoices SET is_incomplete = 1, updated_at = ? WHERE id = ?",
                (datetime.now(UTC).isoformat(), invoice_id),
            )
        logger.warning("invoice_marked_incomplete", invoice_id=invoice_id)

    async def _fetch_items(
        self, conn: aiosqlite.Connection, invoice_id: int
    ) -> list[InvoiceLineItem]:
        cursor = await conn.execute(
            """
            SELECT * FROM invoice_items
            WHERE invoice_id = ?
            ORDER BY position, id
            """,
            (invoice_id,),
        )
        rows = await cursor.fetchall()
        return [self._row_to_item(r) for r in rows]

    @staticmethod
    def _row_to_invoice(row: aiosqlite.Row, items: list[InvoiceLineItem]) -> Invoice:
        customer = None
        if row["customer_id"] is not None and row["customer_name"] is not None:
            customer = Customer(
                id=row["customer_id"],
                name=row["customer_name"],
                phone=row["customer_phone"],
                email=row["customer_email"],
                address=row["customer_address"],
            )

        return Invoice(
            id=row["id"],
            invoice_number=row["invoice_number"],
            invoice_type=InvoiceType(row["invoice_type"]),
            customer_id=row["customer_id"],
            customer=customer,
            owner_id=row["owner_id"],
            items=items,
            tax_rate=parse_money(row["tax_rate"]),
            subtotal=parse_money(row["subtotal"]),
            tax_amount=parse_money(row["tax_amount"]),
            total_amount=parse_money(row["total_amount"]),
            status=InvoiceStatus(row["status"]),
            invoice_date=parse_day(row["invoice_date"]),
            notes=row["notes"],
            is_incomplete=bool(row["is_incomplete"]),
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )

    @staticmethod
    def _row_to_item(row: aiosqlite.Row) -> InvoiceLineItem:
        return InvoiceLineItem(
            id=row["id"],
            invoice_id=row["invoice_id"],
            position=row["position"],
            description=row["description"],
            quantity=parse_money(row["quantity"]),
            unit_price=parse_money(row["unit_price"]),
            created_at=parse_timestamp(row["created_at"]),
        )
