"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from decimal import Decimal
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    data_dir: Path = Path("data")
    db_name: str = "ledger.db"

    # SQLite settings
    pool_size: int = 5
    busy_timeout: int = 30000  # ms

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Header set by the upstream identity provider
    user_header: str = "X-User-Id"


class InvoiceSettings(BaseSettings):
    """Invoice creation policy."""

    model_config = SettingsConfigDict(env_prefix="INVOICE_")

    number_prefix: str = "INV"
    default_tax_rate: Decimal = Decimal("15")
    initial_status: Literal["pending", "paid"] = "pending"

    @field_validator("number_prefix")
    @classmethod
    def strip_prefix(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("number_prefix must not be empty")
        return v


class ReportSettings(BaseSettings):
    """Report presentation configuration."""

    model_config = SettingsConfigDict(env_prefix="REPORT_")

    unknown_accountant_label: str = "Unknown"
    month_label_format: str = "%b %Y"


class PdfSettings(BaseSettings):
    """Printable invoice/report configuration."""

    model_config = SettingsConfigDict(env_prefix="PDF_")

    company_name: str = "LedgerDesk"
    company_address: str = ""
    company_phone: str = ""
    company_email: str = ""
    footer_text: str = "Generated by LedgerDesk"
    currency_label: str = "SAR"
    logo_path: str | None = None
    arabic_font_path: str | None = None


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "LedgerDesk"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["console", "json"] | None = None  # None: console in development

    # Sub-settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    api: APISettings = Field(default_factory=APISettings)
    invoice: InvoiceSettings = Field(default_factory=InvoiceSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)
    pdf: PdfSettings = Field(default_factory=PdfSettings)

    @field_validator("storage", mode="before")
    @classmethod
    def ensure_data_dir(cls, v: Any) -> StorageSettings:
        if isinstance(v, dict):
            settings = StorageSettings(**v)
        else:
            settings = v or StorageSettings()
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return settings


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
