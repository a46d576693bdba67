"""
Use case: Delete an entity by id.

Input: entity id
Output: None
Side effects: Removes the entity from the repository.
Failure cases: NotFoundError, UnclassifiedError.
"""

import logging
from typing import Generic, TypeVar
from uuid import UUID

from onlinestore.application.repository_guard import repository_call
from onlinestore.domain.errors import NotFoundError
from onlinestore.domain.ports import EntityRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DeleteEntityUseCase(Generic[T]):
    """Removes an entity. Deleting a missing id always reports NotFound."""

    def __init__(self, entity_name: str, repository: EntityRepository[T]) -> None:
        self._entity_name = entity_name
        self._repository = repository

    def execute(self, entity_id: UUID) -> None:
        with repository_call(f"delete {self._entity_name}"):
            removed = self._repository.delete(entity_id)

        if not removed:
            raise NotFoundError(self._entity_name, entity_id)

        logger.info("Deleted %s id=%s", self._entity_name, entity_id)
