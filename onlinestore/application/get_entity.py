"""
Use case: Retrieve one entity by id.

Input: entity id
Output: entity
Side effects: None (read-only query).
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


class GetEntityUseCase(Generic[T]):
    """Looks up a single entity, failing when it does not exist."""

    def __init__(self, entity_name: str, repository: EntityRepository[T]) -> None:
        self._entity_name = entity_name
        self._repository = repository

    def execute(self, entity_id: UUID) -> T:
        """Run the get use case.

        Raises:
            NotFoundError: If no entity has ``entity_id``.
            UnclassifiedError: If the repository fails unexpectedly.
        """
        logger.info("Retrieving %s id=%s", self._entity_name, entity_id)

        with repository_call(f"get {self._entity_name}"):
            entity = self._repository.get(entity_id)

        if entity is None:
            raise NotFoundError(self._entity_name, entity_id)
        return entity
