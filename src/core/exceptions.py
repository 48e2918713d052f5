"""
Domain exceptions for the ledger application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class LedgerError(Exception):
    """Base exception for all ledger errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(LedgerError):
    """Base exception for storage operations."""

    pass


class ResourceNotFoundError(StorageError):
    """A record does not exist or is not visible to the caller."""

    pass


class InvoiceNotFoundError(ResourceNotFoundError):
    """Invoice not found in storage."""

    def __init__(self, invoice_id: int):
        super().__init__(
            f"Invoice not found: {invoice_id}",
            code="INVOICE_NOT_FOUND",
            details={"invoice_id": invoice_id},
        )


class CustomerNotFoundError(ResourceNotFoundError):
    """Customer not found in storage."""

    def __init__(self, customer_id: int | None):
        super().__init__(
            f"Customer not found: {customer_id}",
            code="CUSTOMER_NOT_FOUND",
            details={"customer_id": customer_id},
        )


class AccountantNotFoundError(ResourceNotFoundError):
    """Accountant profile not found."""

    def __init__(self, user_id: str):
        super().__init__(
            f"Accountant not found: {user_id}",
            code="ACCOUNTANT_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvoiceItemsWriteError(StorageError):
    """The invoice header was saved but its line items were not."""

    def __init__(self, invoice_id: int, invoice_number: str, reason: str):
        super().__init__(
            f"Invoice {invoice_number} was saved without its line items: {reason}",
            code="INVOICE_ITEMS_WRITE_FAILED",
            details={
                "invoice_id": invoice_id,
                "invoice_number": invoice_number,
                "reason": reason,
            },
        )


# Conflict Exceptions
class ConflictError(LedgerError):
    """Request conflicts with the current state."""

    pass


class DuplicateAccountantError(ConflictError):
    """A profile already exists for this user id."""

    def __init__(self, user_id: str):
        super().__init__(
            f"A profile already exists for user: {user_id}",
            code="DUPLICATE_ACCOUNTANT",
            details={"user_id": user_id},
        )


class SetupAlreadyCompletedError(ConflictError):
    """An administrator has already been registered."""

    def __init__(self) -> None:
        super().__init__(
            "An administrator already exists",
            code="SETUP_ALREADY_COMPLETED",
        )


# Lifecycle Exceptions
class InvalidStatusTransitionError(LedgerError):
    """Status change is not allowed by the transition table."""

    def __init__(self, invoice_id: int | None, current: str, requested: str):
        super().__init__(
            f"Cannot move invoice {invoice_id} from {current} to {requested}",
            code="INVALID_STATUS_TRANSITION",
            details={
                "invoice_id": invoice_id,
                "current": current,
                "requested": requested,
            },
        )


# Access Exceptions
class AuthenticationError(LedgerError):
    """Caller identity is missing or unknown."""

    def __init__(self, reason: str):
        super().__init__(
            f"Authentication required: {reason}",
            code="AUTHENTICATION_REQUIRED",
            details={"reason": reason},
        )


class PermissionDeniedError(LedgerError):
    """Caller lacks the role required for the operation."""

    def __init__(self, operation: str, required_role: str = "admin"):
        super().__init__(
            f"'{operation}' requires the {required_role} role",
            code="PERMISSION_DENIED",
            details={"operation": operation, "required_role": required_role},
        )


# Validation Exceptions
class ValidationError(LedgerError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class ConfigurationError(LedgerError):
    """Configuration error."""

    pass
