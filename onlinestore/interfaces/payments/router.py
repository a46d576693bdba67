"""
FastAPI router for the payments bounded context.

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
from onlinestore.domain.payments.entities import Payment
from onlinestore.interfaces.payments.dependencies import (
    PAYMENTS_PATH,
    get_create_payment_use_case,
    get_delete_payment_use_case,
    get_list_payments_use_case,
    get_payment_use_case,
    get_update_payment_use_case,
)
from onlinestore.interfaces.payments.schemas import PaymentRequest, PaymentResponse
from onlinestore.shared.errors.schemas import ErrorResponse
from onlinestore.shared.security.rate_limiting import (
    limiter,
    read_rate_limit,
    write_rate_limit,
)

router = APIRouter(prefix=PAYMENTS_PATH, tags=["payments"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PaymentResponse,
    responses={400: ERROR_RESPONSES[400], 500: ERROR_RESPONSES[500]},
    summary="Create a payment",
)
@limiter.limit(write_rate_limit)
def create_payment(
    request: Request,
    response: Response,
    payload: PaymentRequest,
    use_case: CreateEntityUseCase[Payment] = Depends(get_create_payment_use_case),
) -> PaymentResponse:
    """Create a payment and point Location at the new resource."""
    created = use_case.execute(payload.to_entity())
    response.headers["Location"] = created.location
    return PaymentResponse.from_entity(created.entity)


@router.put(
    "/{payment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
    summary="Update a payment",
)
@limiter.limit(write_rate_limit)
def update_payment(
    request: Request,
    payment_id: UUID,
    payload: PaymentRequest,
    use_case: UpdateEntityUseCase[Payment] = Depends(get_update_payment_use_case),
) -> Response:
    use_case.execute(payment_id, payload.to_entity())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "",
    response_model=list[PaymentResponse],
    responses={500: ERROR_RESPONSES[500]},
    summary="List payments",
)
@limiter.limit(read_rate_limit)
def list_payments(
    request: Request,
    use_case: ListEntitiesUseCase[Payment] = Depends(get_list_payments_use_case),
) -> list[PaymentResponse]:
    return [PaymentResponse.from_entity(p) for p in use_case.execute()]


@router.get(
    "/{payment_id}",
    response_model=PaymentResponse,
    responses=ERROR_RESPONSES,
    summary="Get a payment",
)
@limiter.limit(read_rate_limit)
def get_payment(
    request: Request,
    payment_id: UUID,
    use_case: GetEntityUseCase[Payment] = Depends(get_payment_use_case),
) -> PaymentResponse:
    return PaymentResponse.from_entity(use_case.execute(payment_id))


@router.delete(
    "/{payment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
    summary="Delete a payment",
)
@limiter.limit(write_rate_limit)
def delete_payment(
    request: Request,
    payment_id: UUID,
    use_case: DeleteEntityUseCase[Payment] = Depends(get_delete_payment_use_case),
) -> Response:
    use_case.execute(payment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
