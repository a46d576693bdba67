"""
Dependency injection for the payments bounded context.

Provides FastAPI dependency functions that wire the payment
repository and validator into the generic use cases.
The repository is a process-wide singleton; tests override
``get_payment_repository`` to isolate state.
"""

from functools import lru_cache

from fastapi import Depends

from onlinestore.application.create_entity import CreateEntityUseCase
from onlinestore.application.delete_entity import DeleteEntityUseCase
from onlinestore.application.get_entity import GetEntityUseCase
from onlinestore.application.list_entities import ListEntitiesUseCase
from onlinestore.application.update_entity import UpdateEntityUseCase
from onlinestore.domain.payments.entities import PAYMENT_ENTITY, Payment
from onlinestore.domain.payments.rules import payment_validator
from onlinestore.domain.ports import EntityRepository
from onlinestore.infrastructure.payments.payment_repository import (
    InMemoryPaymentRepository,
)

PAYMENTS_PATH = "/api/payments"


@lru_cache
def get_payment_repository() -> EntityRepository[Payment]:
    """Return the process-wide payment store."""
    return InMemoryPaymentRepository()


def get_create_payment_use_case(
    repository: EntityRepository[Payment] = Depends(get_payment_repository),
) -> CreateEntityUseCase[Payment]:
    return CreateEntityUseCase(
        entity_name=PAYMENT_ENTITY,
        repository=repository,
        validator=payment_validator,
        resource_path=PAYMENTS_PATH,
    )


def get_update_payment_use_case(
    repository: EntityRepository[Payment] = Depends(get_payment_repository),
) -> UpdateEntityUseCase[Payment]:
    return UpdateEntityUseCase(
        entity_name=PAYMENT_ENTITY,
        repository=repository,
        validator=payment_validator,
    )


def get_list_payments_use_case(
    repository: EntityRepository[Payment] = Depends(get_payment_repository),
) -> ListEntitiesUseCase[Payment]:
    return ListEntitiesUseCase(entity_name=PAYMENT_ENTITY, repository=repository)


def get_payment_use_case(
    repository: EntityRepository[Payment] = Depends(get_payment_repository),
) -> GetEntityUseCase[Payment]:
    return GetEntityUseCase(entity_name=PAYMENT_ENTITY, repository=repository)


def get_delete_payment_use_case(
    repository: EntityRepository[Payment] = Depends(get_payment_repository),
) -> DeleteEntityUseCase[Payment]:
    return DeleteEntityUseCase(entity_name=PAYMENT_ENTITY, repository=repository)
