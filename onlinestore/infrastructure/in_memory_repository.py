"""
Adapter: generic in-memory entity store.

Implements the EntityRepository port over a dict keyed by UUID.
Entities are frozen dataclasses; writes store replaced copies.
A lock serializes every operation so each call is atomic.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import replace
from typing import Optional, TypeVar
from uuid import UUID, uuid4

from onlinestore.domain.ports import EntityRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryRepository(EntityRepository[T]):
    """Thread-safe in-memory implementation of EntityRepository.

    Insertion order is preserved by ``list``.
    """

    def __init__(self, seed: Iterable[T] = ()) -> None:
        self._lock = threading.Lock()
        self._entities: dict[UUID, T] = {}
        for entity in seed:
            self._store(entity)

    def _store(self, entity: T) -> T:
        entity_id = getattr(entity, "id", None)
        if entity_id is None or entity_id.int == 0:
            entity = replace(entity, id=uuid4())
        self._entities[entity.id] = entity
        return entity

    def add(self, entity: T) -> T:
        """Store an entity, assigning a fresh UUID when it has none."""
        with self._lock:
            stored = self._store(entity)
        logger.debug("Stored %s id=%s", type(entity).__name__, stored.id)
        return stored

    def update(self, entity_id: UUID, entity: T) -> Optional[T]:
        """Replace every field but the identifier of an existing entity."""
        with self._lock:
            if entity_id not in self._entities:
                return None
            updated = replace(entity, id=entity_id)
            self._entities[entity_id] = updated
            return updated

    def get(self, entity_id: UUID) -> Optional[T]:
        with self._lock:
            return self._entities.get(entity_id)

    def delete(self, entity_id: UUID) -> bool:
        with self._lock:
            return self._entities.pop(entity_id, None) is not None

    def list(self) -> list[T]:
        with self._lock:
            return list(self._entities.values())
