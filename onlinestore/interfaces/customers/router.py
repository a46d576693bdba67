"""
FastAPI router for the customers bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from onlinestore.application.create_entity import CreateEntityUseCase
from onlinestore.application.delete_entity import DeleteEntityUseCase
from onlinestore.application.get_entity import GetEntityUseCase
from onlinestore.application.list_entities import ListEntitiesUseCase
from onlinestore.application.update_entity import UpdateEntityUseCase
from onlinestore.domain.customers.entities import Customer
from onlinestore.interfaces.customers.dependencies import (
    CUSTOMERS_PATH,
    get_create_customer_use_case,
    get_customer_use_case,
    get_delete_customer_use_case,
    get_list_customers_use_case,
    get_update_customer_use_case,
)
from onlinestore.interfaces.customers.schemas import CustomerRequest, CustomerResponse
from onlinestore.shared.errors.schemas import ErrorResponse
from onlinestore.shared.security.rate_limiting import (
    limiter,
    read_rate_limit,
    write_rate_limit,
)

router = APIRouter(prefix=CUSTOMERS_PATH, tags=["customers"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CustomerResponse,
    responses={400: ERROR_RESPONSES[400], 500: ERROR_RESPONSES[500]},
    summary="Create a customer",
)
@limiter.limit(write_rate_limit)
def create_customer(
    request: Request,
    response: Response,
    payload: CustomerRequest,
    use_case: CreateEntityUseCase[Customer] = Depends(get_create_customer_use_case),
) -> CustomerResponse:
    """Create a customer and point Location at the new resource."""
    created = use_case.execute(payload.to_entity())
    response.headers["Location"] = created.location
    return CustomerResponse.from_entity(created.entity)


@router.put(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
    summary="Update a customer",
)
@limiter.limit(write_rate_limit)
def update_customer(
    request: Request,
    customer_id: UUID,
    payload: CustomerRequest,
    use_case: UpdateEntityUseCase[Customer] = Depends(get_update_customer_use_case),
) -> Response:
    use_case.execute(customer_id, payload.to_entity())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "",
    response_model=list[CustomerResponse],
    responses={500: ERROR_RESPONSES[500]},
    summary="List customers",
)
@limiter.limit(read_rate_limit)
def list_customers(
    request: Request,
    use_case: ListEntitiesUseCase[Customer] = Depends(get_list_customers_use_case),
) -> list[CustomerResponse]:
    return [CustomerResponse.from_entity(c) for c in use_case.execute()]


@router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    responses=ERROR_RESPONSES,
    summary="Get a customer",
)
@limiter.limit(read_rate_limit)
def get_customer(
    request: Request,
    customer_id: UUID,
    use_case: GetEntityUseCase[Customer] = Depends(get_customer_use_case),
) -> CustomerResponse:
    return CustomerResponse.from_entity(use_case.execute(customer_id))


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
    summary="Delete a customer",
)
@limiter.limit(write_rate_limit)
def delete_customer(
    request: Request,
    customer_id: UUID,
    use_case: DeleteEntityUseCase[Customer] = Depends(get_delete_customer_use_case),
) -> Response:
    use_case.execute(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
