"""Abstract repository interface shared by every aggregate."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from taskboard.domain.common.entity import BaseEntity

T = TypeVar("T", bound=BaseEntity)


class Repository(ABC, Generic[T]):

    @abstractmethod
    def create(self, data: dict) -> T:
        """Store a new entity built from data; assigns id, timestamps and version 1."""
        ...

    @abstractmethod
    def find_by_id(self, entity_id: str) -> Optional[T]:
        """Return a copy of the entity, or None."""
        ...

    @abstractmethod
    def find_all(self, filter: Optional[dict] = None) -> List[T]:
        """Return copies of all entities matching every non-None filter field, in insertion order."""
        ...

    @abstractmethod
    def update(self, entity_id: str, changes: dict) -> T:
        """Merge changes, bump version, refresh updated_at. Raises NotFoundError for an unknown id."""
        ...

    @abstractmethod
    def delete(self, entity_id: str) -> bool:
        """Remove the entity. Returns True if something was deleted."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored entities."""
        ...
