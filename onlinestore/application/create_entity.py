"""
Use case: Create an entity.

Input: candidate entity (identifier absent)
Output: CreatedEntity (stored entity + resource location)
Side effects: Adds the entity to the repository.
Failure cases: ValidationFailedError, UnclassifiedError.
"""

import logging
from typing import Generic, TypeVar

from onlinestore.application.dtos import CreatedEntity
from onlinestore.application.repository_guard import repository_call
from onlinestore.application.validate_candidate import ensure_valid
from onlinestore.domain.ports import EntityRepository
from onlinestore.domain.validation import Validator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CreateEntityUseCase(Generic[T]):
    """Validates a candidate and stores it.

    The repository is never touched when validation fails.
    """

    def __init__(
        self,
        entity_name: str,
        repository: EntityRepository[T],
        validator: Validator,
        resource_path: str,
    ) -> None:
        """Initialize the use case.

        Args:
            entity_name: Entity type name used in logs and failures.
            repository: Repository for the entity type.
            validator: Rule table for the entity type.
            resource_path: Collection path used to build the location.
        """
        self._entity_name = entity_name
        self._repository = repository
        self._validator = validator
        self._resource_path = resource_path.rstrip("/")

    def execute(self, candidate: T) -> CreatedEntity[T]:
        """Run the create use case.

        Args:
            candidate: The entity to create.

        Returns:
            The stored entity and its resource location.

        Raises:
            ValidationFailedError: If the candidate breaks any rule.
            UnclassifiedError: If the repository fails unexpectedly.
        """
        ensure_valid(self._validator, candidate)

        with repository_call(f"create {self._entity_name}"):
            created = self._repository.add(candidate)

        logger.info("Created %s id=%s", self._entity_name, created.id)
        return CreatedEntity(
            entity=created,
            location=f"{self._resource_path}/{created.id}",
        )
