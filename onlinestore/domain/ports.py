"""
Port interfaces (ABCs) shared by every bounded context.

Ports define the contracts that use cases require from storage.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar
from uuid import UUID

T = TypeVar("T")


class EntityRepository(ABC, Generic[T]):
    """Port for storing one entity type keyed by UUID.

    Each operation is a single atomic call; implementations provide
    any serialization needed under concurrent access.
    """

    @abstractmethod
    def add(self, entity: T) -> T:
        """Store an entity, assigning an identifier when it has none.

        Returns:
            The stored entity, carrying its identifier.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, entity_id: UUID, entity: T) -> Optional[T]:
        """Replace the fields of an existing entity.

        Returns:
            The updated entity, or None if ``entity_id`` is unknown.
        """
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[T]:
        """Return all current entities, possibly none."""
        raise NotImplementedError

    @abstractmethod
    def get(self, entity_id: UUID) -> Optional[T]:
        """Return an entity by its identifier, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, entity_id: UUID) -> bool:
        """Remove an entity.

        Returns:
            True if an entity existed and was removed, False otherwise.
        """
        raise NotImplementedError
