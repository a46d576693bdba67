"""
Use case: Update an existing entity.

Input: entity id, candidate entity
Output: None
Side effects: Replaces the stored entity's fields.
Failure cases: ValidationFailedError, NotFoundError, UnclassifiedError.
"""

import logging
from typing import Generic, TypeVar
from uuid import UUID

from onlinestore.application.repository_guard import repository_call
from onlinestore.application.validate_candidate import ensure_valid
from onlinestore.domain.errors import NotFoundError
from onlinestore.domain.ports import EntityRepository
from onlinestore.domain.validation import Validator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UpdateEntityUseCase(Generic[T]):
    """Validates a candidate, then updates the entity it targets.

    Validation runs before any lookup: an invalid payload is reported
    as a validation failure even when the id is unknown.
    """

    def __init__(
        self,
        entity_name: str,
        repository: EntityRepository[T],
        validator: Validator,
    ) -> None:
        self._entity_name = entity_name
        self._repository = repository
        self._validator = validator

    def execute(self, entity_id: UUID, candidate: T) -> None:
        """Run the update use case.

        Raises:
            ValidationFailedError: If the candidate breaks any rule.
            NotFoundError: If no entity has ``entity_id``.
            UnclassifiedError: If the repository fails unexpectedly.
        """
        ensure_valid(self._validator, candidate)

        with repository_call(f"update {self._entity_name}"):
            updated = self._repository.update(entity_id, candidate)

        if updated is None:
            raise NotFoundError(self._entity_name, entity_id)

        logger.info("Updated %s id=%s", self._entity_name, entity_id)
