"""
Dependency injection for the customers bounded context.

Provides FastAPI dependency functions that wire the customer
repository and validator into the generic use cases.
The repository is a process-wide singleton; tests override
``get_customer_repository`` to isolate state.
"""

from functools import lru_cache

from fastapi import Depends

from onlinestore.application.create_entity import CreateEntityUseCase
from onlinestore.application.delete_entity import DeleteEntityUseCase
from onlinestore.application.get_entity import GetEntityUseCase
from onlinestore.application.list_entities import ListEntitiesUseCase
from onlinestore.application.update_entity import UpdateEntityUseCase
from onlinestore.core.config import settings
from onlinestore.domain.customers.entities import CUSTOMER_ENTITY, Customer
from onlinestore.domain.customers.rules import customer_validator
from onlinestore.domain.ports import EntityRepository
from onlinestore.infrastructure.customers.customer_repository import (
    InMemoryCustomerRepository,
)

CUSTOMERS_PATH = "/api/customers"


@lru_cache
def get_customer_repository() -> EntityRepository[Customer]:
    """Return the process-wide customer store."""
    return InMemoryCustomerRepository(seed_sample_data=settings.seed_sample_data)


def get_create_customer_use_case(
    repository: EntityRepository[Customer] = Depends(get_customer_repository),
) -> CreateEntityUseCase[Customer]:
    return CreateEntityUseCase(
        entity_name=CUSTOMER_ENTITY,
        repository=repository,
        validator=customer_validator,
        resource_path=CUSTOMERS_PATH,
    )


def get_update_customer_use_case(
    repository: EntityRepository[Customer] = Depends(get_customer_repository),
) -> UpdateEntityUseCase[Customer]:
    return UpdateEntityUseCase(
        entity_name=CUSTOMER_ENTITY,
        repository=repository,
        validator=customer_validator,
    )


def get_list_customers_use_case(
    repository: EntityRepository[Customer] = Depends(get_customer_repository),
) -> ListEntitiesUseCase[Customer]:
    return ListEntitiesUseCase(entity_name=CUSTOMER_ENTITY, repository=repository)


def get_customer_use_case(
    repository: EntityRepository[Customer] = Depends(get_customer_repository),
) -> GetEntityUseCase[Customer]:
    return GetEntityUseCase(entity_name=CUSTOMER_ENTITY, repository=repository)


def get_delete_customer_use_case(
    repository: EntityRepository[Customer] = Depends(get_customer_repository),
) -> DeleteEntityUseCase[Customer]:
    return DeleteEntityUseCase(entity_name=CUSTOMER_ENTITY, repository=repository)
