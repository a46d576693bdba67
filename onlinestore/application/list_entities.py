"""
Use case: List all entities of one type.

Input: None
Output: list of entities (possibly empty)
Side effects: None (read-only query).
Failure cases: UnclassifiedError.
"""

import logging
from typing import Generic, TypeVar

from onlinestore.application.repository_guard import repository_call
from onlinestore.domain.ports import EntityRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ListEntitiesUseCase(Generic[T]):
    """Returns every stored entity. An empty store is not an error."""

    def __init__(self, entity_name: str, repository: EntityRepository[T]) -> None:
        self._entity_name = entity_name
        self._repository = repository

    def execute(self) -> list[T]:
        with repository_call(f"list {self._entity_name}"):
            entities = list(self._repository.list())

        logger.info("Listed %d %s record(s)", len(entities), self._entity_name)
        return entities
