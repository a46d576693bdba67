"""
FastAPI router for the orders bounded context.

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
from onlinestore.domain.orders.entities import Order
from onlinestore.interfaces.orders.dependencies import (
    ORDERS_PATH,
    get_create_order_use_case,
    get_delete_order_use_case,
    get_list_orders_use_case,
    get_order_use_case,
    get_update_order_use_case,
)
from onlinestore.interfaces.orders.schemas import OrderRequest, OrderResponse
from onlinestore.shared.errors.schemas import ErrorResponse
from onlinestore.shared.security.rate_limiting import (
    limiter,
    read_rate_limit,
    write_rate_limit,
)

router = APIRouter(prefix=ORDERS_PATH, tags=["orders"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=OrderResponse,
    responses={400: ERROR_RESPONSES[400], 500: ERROR_RESPONSES[500]},
    summary="Create an order",
)
@limiter.limit(write_rate_limit)
def create_order(
    request: Request,
    response: Response,
    payload: OrderRequest,
    use_case: CreateEntityUseCase[Order] = Depends(get_create_order_use_case),
) -> OrderResponse:
    """Create an order and point Location at the new resource."""
    created = use_case.execute(payload.to_entity())
    response.headers["Location"] = created.location
    return OrderResponse.from_entity(created.entity)


@router.put(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
    summary="Update an order",
)
@limiter.limit(write_rate_limit)
def update_order(
    request: Request,
    order_id: UUID,
    payload: OrderRequest,
    use_case: UpdateEntityUseCase[Order] = Depends(get_update_order_use_case),
) -> Response:
    use_case.execute(order_id, payload.to_entity())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "",
    response_model=list[OrderResponse],
    responses={500: ERROR_RESPONSES[500]},
    summary="List orders",
)
@limiter.limit(read_rate_limit)
def list_orders(
    request: Request,
    use_case: ListEntitiesUseCase[Order] = Depends(get_list_orders_use_case),
) -> list[OrderResponse]:
    return [OrderResponse.from_entity(o) for o in use_case.execute()]


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    responses=ERROR_RESPONSES,
    summary="Get an order",
)
@limiter.limit(read_rate_limit)
def get_order(
    request: Request,
    order_id: UUID,
    use_case: GetEntityUseCase[Order] = Depends(get_order_use_case),
) -> OrderResponse:
    return OrderResponse.from_entity(use_case.execute(order_id))


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
    summary="Delete an order",
)
@limiter.limit(write_rate_limit)
def delete_order(
    request: Request,
    order_id: UUID,
    use_case: DeleteEntityUseCase[Order] = Depends(get_delete_order_use_case),
) -> Response:
    use_case.execute(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
