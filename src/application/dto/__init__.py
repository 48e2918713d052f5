"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from src.application.dto.requests import (
    CreateInvoiceRequest,
    CustomerRequest,
    LineItemRequest,
    RegisterAccountantRequest,
    ReportRequest,
    SetupAdminRequest,
    UpdateInvoiceStatusRequest,
)
from src.application.dto.responses import (
    AccountantListResponse,
    AccountantResponse,
    AccountantTotalsResponse,
    ComponentHealthResponse,
    CustomerListResponse,
    CustomerResponse,
    DashboardStatsResponse,
    ErrorResponse,
    HealthResponse,
    InvoiceListResponse,
    InvoiceResponse,
    InvoiceStatusResponse,
    LineItemResponse,
    MonthTotalsResponse,
    ReportResponse,
    SetupStatusResponse,
)

__all__ = [
    # Requests
    "CreateInvoiceRequest",
    "CustomerRequest",
    "LineItemRequest",
    "RegisterAccountantRequest",
    "ReportRequest",
    "SetupAdminRequest",
    "UpdateInvoiceStatusRequest",
    # Responses
    "AccountantListResponse",
    "AccountantResponse",
    "AccountantTotalsResponse",
    "ComponentHealthResponse",
    "CustomerListResponse",
    "CustomerResponse",
    "DashboardStatsResponse",
    "ErrorResponse",
    "HealthResponse",
    "InvoiceListResponse",
    "InvoiceResponse",
    "InvoiceStatusResponse",
    "LineItemResponse",
    "MonthTotalsResponse",
    "ReportResponse",
    "SetupStatusResponse",
]
