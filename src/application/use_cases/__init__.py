"""Application use cases."""

from src.application.use_cases.create_invoice import CreateInvoiceResult, CreateInvoiceUseCase
from src.application.use_cases.create_invoice_pdf import CreateInvoicePdfUseCase, PdfResult
from src.application.use_cases.create_report_pdf import CreateReportPdfUseCase
from src.application.use_cases.generate_report import GenerateReportUseCase, ReportResult
from src.application.use_cases.get_dashboard_stats import GetDashboardStatsUseCase
from src.application.use_cases.get_invoice import GetInvoiceUseCase, invoice_to_response
from src.application.use_cases.list_invoices import ListInvoicesUseCase
from src.application.use_cases.manage_accountants import (
    ListAccountantsUseCase,
    RegisterAccountantUseCase,
    RemoveAccountantUseCase,
    SetupAdminUseCase,
    profile_to_response,
    require_admin,
)
from src.application.use_cases.update_invoice_status import (
    StatusChangeResult,
    UpdateInvoiceStatusUseCase,
)

__all__ = [
    # Invoices
    "CreateInvoiceUseCase",
    "CreateInvoiceResult",
    "GetInvoiceUseCase",
    "ListInvoicesUseCase",
    "UpdateInvoiceStatusUseCase",
    "StatusChangeResult",
    "invoice_to_response",
    # Reporting
    "GenerateReportUseCase",
    "ReportResult",
    "GetDashboardStatsUseCase",
    # Staff
    "ListAccountantsUseCase",
    "RegisterAccountantUseCase",
    "RemoveAccountantUseCase",
    "SetupAdminUseCase",
    "profile_to_response",
    "require_admin",
    # Printing
    "CreateInvoicePdfUseCase",
    "CreateReportPdfUseCase",
    "PdfResult",
]
