"""SQLite storage implementations."""

from src.infrastructure.storage.sqlite.accountant_store import SQLiteAccountantStore
from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from src.infrastructure.storage.sqlite.customer_store import SQLiteCustomerStore
from src.infrastructure.storage.sqlite.invoice_store import SQLiteInvoiceStore

# Singleton instances
_invoice_store: SQLiteInvoiceStore | None = None
_customer_store: SQLiteCustomerStore | None = None
_accountant_store: SQLiteAccountantStore | None = None


async def get_invoice_store() -> SQLiteInvoiceStore:
    """Get singleton invoice store instance."""
    global _invoice_store
    if _invoice_store is None:
        _invoice_store = SQLiteInvoiceStore()
    return _invoice_store


async def get_customer_store() -> SQLiteCustomerStore:
    """Get singleton customer store instance."""
    global _customer_store
    if _customer_store is None:
        _customer_store = SQLiteCustomerStore()
    return _customer_store


async def get_accountant_store() -> SQLiteAccountantStore:
    """Get singleton accountant store instance."""
    global _accountant_store
    if _accountant_store is None:
        _accountant_store = SQLiteAccountantStore()
    return _accountant_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLiteAccountantStore",
    "SQLiteCustomerStore",
    "SQLiteInvoiceStore",
    # Factory functions
    "get_accountant_store",
    "get_customer_store",
    "get_invoice_store",
]
