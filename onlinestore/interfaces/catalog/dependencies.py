"""
Dependency injection for the catalog bounded context.

Provides FastAPI dependency functions that wire the product
repository and validator into the generic use cases.
The repository is a process-wide singleton; tests override
``get_product_repository`` to isolate state.
"""

from functools import lru_cache

from fastapi import Depends

from onlinestore.application.create_entity import CreateEntityUseCase
from onlinestore.application.delete_entity import DeleteEntityUseCase
from onlinestore.application.get_entity import GetEntityUseCase
from onlinestore.application.list_entities import ListEntitiesUseCase
from onlinestore.application.update_entity import UpdateEntityUseCase
from onlinestore.core.config import settings
from onlinestore.domain.catalog.entities import PRODUCT_ENTITY, Product
from onlinestore.domain.catalog.rules import product_validator
from onlinestore.domain.ports import EntityRepository
from onlinestore.infrastructure.catalog.product_repository import (
    InMemoryProductRepository,
)

PRODUCTS_PATH = "/api/products"


@lru_cache
def get_product_repository() -> EntityRepository[Product]:
    """Return the process-wide product store."""
    return InMemoryProductRepository(seed_sample_data=settings.seed_sample_data)


def get_create_product_use_case(
    repository: EntityRepository[Product] = Depends(get_product_repository),
) -> CreateEntityUseCase[Product]:
    return CreateEntityUseCase(
        entity_name=PRODUCT_ENTITY,
        repository=repository,
        validator=product_validator,
        resource_path=PRODUCTS_PATH,
    )


def get_update_product_use_case(
    repository: EntityRepository[Product] = Depends(get_product_repository),
) -> UpdateEntityUseCase[Product]:
    return UpdateEntityUseCase(
        entity_name=PRODUCT_ENTITY,
        repository=repository,
        validator=product_validator,
    )


def get_list_products_use_case(
    repository: EntityRepository[Product] = Depends(get_product_repository),
) -> ListEntitiesUseCase[Product]:
    return ListEntitiesUseCase(entity_name=PRODUCT_ENTITY, repository=repository)


def get_product_use_case(
    repository: EntityRepository[Product] = Depends(get_product_repository),
) -> GetEntityUseCase[Product]:
    return GetEntityUseCase(entity_name=PRODUCT_ENTITY, repository=repository)


def get_delete_product_use_case(
    repository: EntityRepository[Product] = Depends(get_product_repository),
) -> DeleteEntityUseCase[Product]:
    return DeleteEntityUseCase(entity_name=PRODUCT_ENTITY, repository=repository)
