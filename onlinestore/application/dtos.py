"""
Data Transfer Objects for the application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class CreatedEntity(Generic[T]):
    """Output DTO for a successful create.

    Attributes:
        entity: The stored entity, carrying its new identifier.
        location: Resource path of the new entity.
    """

    entity: T
    location: str
