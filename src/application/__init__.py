"""
Application layer - Use cases and DTOs.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services and stores

Use cases are the only entry point for API handlers, except plain customer
CRUD which goes straight to the store.
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
    ErrorResponse,
    HealthResponse,
    InvoiceResponse,
    ReportResponse,
)
from src.application.use_cases import (
    CreateInvoicePdfUseCase,
    CreateInvoiceUseCase,
    CreateReportPdfUseCase,
    GenerateReportUseCase,
    GetDashboardStatsUseCase,
    GetInvoiceUseCase,
    ListAccountantsUseCase,
    ListInvoicesUseCase,
    RegisterAccountantUseCase,
    RemoveAccountantUseCase,
    SetupAdminUseCase,
    UpdateInvoiceStatusUseCase,
)

__all__ = [
    # Request DTOs
    "CreateInvoiceRequest",
    "CustomerRequest",
    "LineItemRequest",
    "RegisterAccountantRequest",
    "ReportRequest",
    "SetupAdminRequest",
    "UpdateInvoiceStatusRequest",
    # Response DTOs
    "ErrorResponse",
    "HealthResponse",
    "InvoiceResponse",
    "ReportResponse",
    # Use Cases
    "CreateInvoiceUseCase",
    "GetInvoiceUseCase",
    "ListInvoicesUseCase",
    "UpdateInvoiceStatusUseCase",
    "GenerateReportUseCase",
    "GetDashboardStatsUseCase",
    "ListAccountantsUseCase",
    "RegisterAccountantUseCase",
    "RemoveAccountantUseCase",
    "SetupAdminUseCase",
    "CreateInvoicePdfUseCase",
    "CreateReportPdfUseCase",
]
