"""
Dependency injection for the orders bounded context.

Provides FastAPI dependency functions that wire the order
repository and validator into the generic use cases.
The repository is a process-wide singleton; tests override
``get_order_repository`` to isolate state.
"""

from functools import lru_cache

from fastapi import Depends

from onlinestore.application.create_entity import CreateEntityUseCase
from onlinestore.application.delete_entity import DeleteEntityUseCase
from onlinestore.application.get_entity import GetEntityUseCase
from onlinestore.application.list_entities import ListEntitiesUseCase
from onlinestore.application.update_entity import UpdateEntityUseCase
from onlinestore.domain.orders.entities import ORDER_ENTITY, Order
from onlinestore.domain.orders.rules import order_validator
from onlinestore.domain.ports import EntityRepository
from onlinestore.infrastructure.orders.order_repository import (
    InMemoryOrderRepository,
)

ORDERS_PATH = "/api/orders"


@lru_cache
def get_order_repository() -> EntityRepository[Order]:
    """Return the process-wide order store."""
    return InMemoryOrderRepository()


def get_create_order_use_case(
    repository: EntityRepository[Order] = Depends(get_order_repository),
) -> CreateEntityUseCase[Order]:
    return CreateEntityUseCase(
        entity_name=ORDER_ENTITY,
        repository=repository,
        validator=order_validator,
        resource_path=ORDERS_PATH,
    )


def get_update_order_use_case(
    repository: EntityRepository[Order] = Depends(get_order_repository),
) -> UpdateEntityUseCase[Order]:
    return UpdateEntityUseCase(
        entity_name=ORDER_ENTITY,
        repository=repository,
        validator=order_validator,
    )


def get_list_orders_use_case(
    repository: EntityRepository[Order] = Depends(get_order_repository),
) -> ListEntitiesUseCase[Order]:
    return ListEntitiesUseCase(entity_name=ORDER_ENTITY, repository=repository)


def get_order_use_case(
    repository: EntityRepository[Order] = Depends(get_order_repository),
) -> GetEntityUseCase[Order]:
    return GetEntityUseCase(entity_name=ORDER_ENTITY, repository=repository)


def get_delete_order_use_case(
    repository: EntityRepository[Order] = Depends(get_order_repository),
) -> DeleteEntityUseCase[Order]:
    return DeleteEntityUseCase(entity_name=ORDER_ENTITY, repository=repository)
