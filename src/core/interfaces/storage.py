"""
Abstract interfaces for storage providers.

Defines contracts for invoice, customer, and accountant stores.
"""

from abc import ABC, abstractmethod

from src.core.entities.accountant import AccountantProfile, Role
from src.core.entities.customer import Customer
from src.core.entities.invoice import (
    Invoice,
    InvoiceFilter,
    InvoiceLineItem,
    InvoiceStatus,
)


class IInvoiceStore(ABC):
    """
    Abstract interface for invoice storage.

    The header and its line items are written by two separate calls;
    callers decide what to do when the second one fails.
    """

    @abstractmethod
    async def create_invoice(self, invoice: Invoice) -> Invoice:
        """
        Persist an invoice header.

        Assigns ``id`` and a unique ``invoice_number``. Line items on the
        draft are NOT written.
        """
        pass

    @abstractmethod
    async def create_line_items(
        self,
        invoice_id: int,
        items: list[InvoiceLineItem],
    ) -> list[InvoiceLineItem]:
        """Persist line items for an existing header, all or nothing."""
        pass

    @abstractmethod
    async def get_invoice(self, invoice_id: int) -> Invoice | None:
        """Get invoice by ID with items and customer."""
        pass

    @abstractmethod
    async def list_invoices(self, invoice_filter: InvoiceFilter) -> list[Invoice]:
        """List invoice headers (no items), newest first."""
        pass

    @abstractmethod
    async def list_line_items(self, invoice_id: int) -> list[InvoiceLineItem]:
        """Get the items of an invoice in insertion order."""
        pass

    @abstractmethod
    async def update_status(self, invoice_id: int, status: InvoiceStatus) -> bool:
        """Set the status. Returns False if the invoice does not exist."""
        pass

    @abstractmethod
    async def mark_incomplete(self, invoice_id: int) -> None:
        """Flag a header whose items could not be written."""
        pass


class ICustomerStore(ABC):
    """Abstract interface for customer storage."""

    @abstractmethod
    async def create_customer(self, customer: Customer) -> Customer:
        """Create a customer."""
        pass

    @abstractmethod
    async def get_customer(self, customer_id: int) -> Customer | None:
        """Get customer by ID."""
        pass

    @abstractmethod
    async def list_customers(self, limit: int = 100, offset: int = 0) -> list[Customer]:
        """List customers, newest first."""
        pass

    @abstractmethod
    async def update_customer(self, customer: Customer) -> Customer:
        """Update an existing customer."""
        pass

    @abstractmethod
    async def delete_customer(self, customer_id: int) -> bool:
        """Delete a customer. Invoices keep a NULL reference."""
        pass


class IAccountantStore(ABC):
    """Abstract interface for staff profiles and roles."""

    @abstractmethod
    async def create_profile(self, profile: AccountantProfile) -> AccountantProfile:
        """Create a profile with its role."""
        pass

    @abstractmethod
    async def get_profile(self, user_id: str) -> AccountantProfile | None:
        """Get profile by user id."""
        pass

    @abstractmethod
    async def get_role(self, user_id: str) -> Role | None:
        """Get the role of a user, or None if unknown."""
        pass

    @abstractmethod
    async def list_profiles(self, role: Role | None = None) -> list[AccountantProfile]:
        """List profiles, optionally restricted to one role."""
        pass

    @abstractmethod
    async def count_profiles(self, role: Role | None = None) -> int:
        """Count profiles, optionally restricted to one role."""
        pass

    @abstractmethod
    async def delete_profile(self, user_id: str) -> bool:
        """Remove a profile and its role. Invoices are kept."""
        pass
