"""Customer domain entity."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator


class Customer(BaseModel):
    """A customer or supplier that invoices may reference."""

    id: int | None = None
    name: str
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    created_by: str | None = None  # user id of the creator
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("phone", "email", "address", mode="before")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """Store empty optional fields as NULL."""
        if v is None:
            return None
        v = str(v).strip()
        return v or None
