"""Staff profiles, roles and the caller context."""

from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field

from src.core.pricing import ZERO


class Role(str, Enum):
    """Authorization role of a system user."""

    ADMIN = "admin"
    ACCOUNTANT = "accountant"


class AccountantProfile(BaseModel):
    """Profile of a system user (admin or accountant)."""

    user_id: str  # issued by the identity provider
    full_name: str
    email: str
    phone: str | None = None
    role: Role = Role.ACCOUNTANT
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class AccountantWithTotals(BaseModel):
    """Accountant profile with all-time invoice totals."""

    profile: AccountantProfile
    total_sales: Decimal = ZERO
    total_purchases: Decimal = ZERO


@dataclass(frozen=True)
class CallerContext:
    """Identity and role of whoever is making a request."""

    user_id: str
    role: Role

    @property
    def is_privileged(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def owner_filter(self) -> str | None:
        """Owner id to pre-filter invoices by, or None for every owner."""
        return None if self.is_privileged else self.user_id
