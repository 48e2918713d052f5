"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.storage import (
    IAccountantStore,
    ICustomerStore,
    IInvoiceStore,
)

__all__ = [
    # Storage interfaces
    "IInvoiceStore",
    "ICustomerStore",
    "IAccountantStore",
]
