"""Storage infrastructure implementations."""

from src.infrastructure.storage.sqlite import (
    SQLiteAccountantStore,
    SQLiteCustomerStore,
    SQLiteInvoiceStore,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)

__all__ = [
    "SQLiteAccountantStore",
    "SQLiteCustomerStore",
    "SQLiteInvoiceStore",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
