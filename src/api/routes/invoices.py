"""Invoice endpoints."""

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response

from src.api.dependencies import (
    get_caller_context,
    get_create_invoice_use_case,
    get_get_invoice_use_case,
    get_invoice_pdf_use_case,
    get_list_invoices_use_case,
    get_update_status_use_case,
)
from src.application.dto.requests import CreateInvoiceRequest, UpdateInvoiceStatusRequest
from src.application.dto.responses import (
    ErrorResponse,
    InvoiceListResponse,
    InvoiceResponse,
    InvoiceStatusResponse,
)
from src.application.use_cases import (
    CreateInvoicePdfUseCase,
    CreateInvoiceUseCase,
    GetInvoiceUseCase,
    ListInvoicesUseCase,
    UpdateInvoiceStatusUseCase,
)
from src.core.entities import CallerContext, InvoiceType

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


@router.post(
    "",
    response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid line items or customer"},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse, "description": "Header saved but items failed"},
    },
)
async def create_invoice(
    request: CreateInvoiceRequest,
    caller: CallerContext = Depends(get_caller_context),
    use_case: CreateInvoiceUseCase = Depends(get_create_invoice_use_case),
) -> InvoiceResponse:
    """Create a sale or purchase invoice owned by the caller."""
    result = await use_case.execute(request, caller)
    return use_case.to_response(result)


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    invoice_type: InvoiceType | None = Query(default=None, alias="type"),
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    caller: CallerContext = Depends(get_caller_context),
    use_case: ListInvoicesUseCase = Depends(get_list_invoices_use_case),
) -> InvoiceListResponse:
    """List invoices newest first; accountants only see their own."""
    invoices = await use_case.execute(caller, invoice_type=invoice_type, limit=limit, offset=offset)
    return use_case.to_response(invoices, limit=limit, offset=offset)


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_invoice(
    invoice_id: int,
    caller: CallerContext = Depends(get_caller_context),
    use_case: GetInvoiceUseCase = Depends(get_get_invoice_use_case),
) -> InvoiceResponse:
    """Get an invoice with its items."""
    invoice = await use_case.execute(invoice_id, caller)
    return use_case.to_response(invoice)


@router.patch(
    "/{invoice_id}/status",
    response_model=InvoiceStatusResponse,
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse, "description": "Transition not allowed"},
    },
)
async def update_invoice_status(
    invoice_id: int,
    request: UpdateInvoiceStatusRequest,
    caller: CallerContext = Depends(get_caller_context),
    use_case: UpdateInvoiceStatusUseCase = Depends(get_update_status_use_case),
) -> InvoiceStatusResponse:
    """Change the status of an invoice."""
    result = await use_case.execute(invoice_id, request.status, caller)
    return use_case.to_response(result)


@router.get(
    "/{invoice_id}/pdf",
    responses={404: {"model": ErrorResponse, "description": "Invoice not found"}},
)
async def get_invoice_pdf(
    invoice_id: int,
    caller: CallerContext = Depends(get_caller_context),
    use_case: CreateInvoicePdfUseCase = Depends(get_invoice_pdf_use_case),
) -> Response:
    """Download a printable invoice."""
    result = await use_case.execute(invoice_id, caller)
    return Response(
        content=result.pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )
