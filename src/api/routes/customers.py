"""Customer management endpoints."""

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import get_admin_context, get_caller_context, get_cust_store
from src.application.dto.requests import CustomerRequest
from src.application.dto.responses import (
    CustomerListResponse,
    CustomerResponse,
    ErrorResponse,
)
from src.config import get_logger
from src.core.entities import CallerContext, Customer
from src.core.exceptions import CustomerNotFoundError
from src.core.interfaces import ICustomerStore

logger = get_logger(__name__)

router = APIRouter(prefix="/api/customers", tags=["customers"])


def _entity_to_response(customer: Customer) -> CustomerResponse:
    """Convert entity to response DTO."""
    return CustomerResponse(
        id=customer.id or 0,
        name=customer.name,
        phone=customer.phone,
        email=customer.email,
        address=customer.address,
        created_by=customer.created_by,
        created_at=customer.created_at,
        updated_at=customer.updated_at,
    )


@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
)
async def create_customer(
    request: CustomerRequest,
    caller: CallerContext = Depends(get_caller_context),
    store: ICustomerStore = Depends(get_cust_store),
) -> CustomerResponse:
    """Create a customer or supplier."""
    customer = await store.create_customer(
        Customer(
            name=request.name.strip(),
            phone=request.phone,
            email=request.email,
            address=request.address,
            created_by=caller.user_id,
        )
    )
    return _entity_to_response(customer)


@router.get("", response_model=CustomerListResponse)
async def list_customers(
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    caller: CallerContext = Depends(get_caller_context),
    store: ICustomerStore = Depends(get_cust_store),
) -> CustomerListResponse:
    """List customers, newest first."""
    customers = await store.list_customers(limit=limit, offset=offset)
    return CustomerListResponse(
        customers=[_entity_to_response(c) for c in customers],
        count=len(customers),
    )


@router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_customer(
    customer_id: int,
    caller: CallerContext = Depends(get_caller_context),
    store: ICustomerStore = Depends(get_cust_store),
) -> CustomerResponse:
    """Get a customer by ID."""
    customer = await store.get_customer(customer_id)
    if customer is None:
        raise CustomerNotFoundError(customer_id)
    return _entity_to_response(customer)


@router.put(
    "/{customer_id}",
    response_model=CustomerResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_customer(
    customer_id: int,
    request: CustomerRequest,
    caller: CallerContext = Depends(get_caller_context),
    store: ICustomerStore = Depends(get_cust_store),
) -> CustomerResponse:
    """Replace the editable fields of a customer."""
    existing = await store.get_customer(customer_id)
    if existing is None:
        raise CustomerNotFoundError(customer_id)

    updated = existing.model_copy(
        update={
            "name": request.name.strip(),
            "phone": request.phone,
            "email": request.email,
            "address": request.address,
        }
    )
    # model_copy skips validation; run the blank-to-null rule again
    updated = Customer.model_validate(updated.model_dump())
    return _entity_to_response(await store.update_customer(updated))


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_customer(
    customer_id: int,
    caller: CallerContext = Depends(get_admin_context),
    store: ICustomerStore = Depends(get_cust_store),
) -> None:
    """Delete a customer (admin only). Invoices keep a null reference."""
    if not await store.delete_customer(customer_id):
        raise CustomerNotFoundError(customer_id)
    logger.info("customer_removed", customer_id=customer_id, by=caller.user_id)
