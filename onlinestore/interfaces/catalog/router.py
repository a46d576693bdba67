"""
FastAPI router for the catalog bounded context.

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
from onlinestore.domain.catalog.entities import Product
from onlinestore.interfaces.catalog.dependencies import (
    PRODUCTS_PATH,
    get_create_product_use_case,
    get_delete_product_use_case,
    get_list_products_use_case,
    get_product_use_case,
    get_update_product_use_case,
)
from onlinestore.interfaces.catalog.schemas import ProductRequest, ProductResponse
from onlinestore.shared.errors.schemas import ErrorResponse
from onlinestore.shared.security.rate_limiting import (
    limiter,
    read_rate_limit,
    write_rate_limit,
)

router = APIRouter(prefix=PRODUCTS_PATH, tags=["products"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductResponse,
    responses={400: ERROR_RESPONSES[400], 500: ERROR_RESPONSES[500]},
    summary="Create a product",
)
@limiter.limit(write_rate_limit)
def create_product(
    request: Request,
    response: Response,
    payload: ProductRequest,
    use_case: CreateEntityUseCase[Product] = Depends(get_create_product_use_case),
) -> ProductResponse:
    """Create a product and point Location at the new resource."""
    created = use_case.execute(payload.to_entity())
    response.headers["Location"] = created.location
    return ProductResponse.from_entity(created.entity)


@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
    summary="Update a product",
)
@limiter.limit(write_rate_limit)
def update_product(
    request: Request,
    product_id: UUID,
    payload: ProductRequest,
    use_case: UpdateEntityUseCase[Product] = Depends(get_update_product_use_case),
) -> Response:
    use_case.execute(product_id, payload.to_entity())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "",
    response_model=list[ProductResponse],
    responses={500: ERROR_RESPONSES[500]},
    summary="List products",
)
@limiter.limit(read_rate_limit)
def list_products(
    request: Request,
    use_case: ListEntitiesUseCase[Product] = Depends(get_list_products_use_case),
) -> list[ProductResponse]:
    return [ProductResponse.from_entity(p) for p in use_case.execute()]


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses=ERROR_RESPONSES,
    summary="Get a product",
)
@limiter.limit(read_rate_limit)
def get_product(
    request: Request,
    product_id: UUID,
    use_case: GetEntityUseCase[Product] = Depends(get_product_use_case),
) -> ProductResponse:
    return ProductResponse.from_entity(use_case.execute(product_id))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
    summary="Delete a product",
)
@limiter.limit(write_rate_limit)
def delete_product(
    request: Request,
    product_id: UUID,
    use_case: DeleteEntityUseCase[Product] = Depends(get_delete_product_use_case),
) -> Response:
    use_case.execute(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
