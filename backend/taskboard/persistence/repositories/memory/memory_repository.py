"""In-memory implementation of Repository[T], keyed by id."""
from __future__ import annotations
import copy
import dataclasses
import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Type

from taskboard.domain.common.entity import IDENTITY_FIELDS
from taskboard.domain.common.errors import NotFoundError
from taskboard.persistence.interfaces.repository import Repository, T

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryRepository(Repository[T]):
    """
    Owns a dict of id -> entity. Reads hand out deep copies so callers can
    never bypass the version and timestamp bookkeeping done by update().
    Mutations hold a per-instance lock.
    """

    def __init__(self, entity_cls: Type[T], clock: Callable[[], datetime] = _utcnow):
        self._entity_cls = entity_cls
        self._clock = clock
        self._fields = frozenset(f.name for f in dataclasses.fields(entity_cls))
        self._items: Dict[str, T] = {}
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _check_fields(self, data: dict, action: str) -> None:
        reserved = IDENTITY_FIELDS.intersection(data)
        if reserved:
            raise ValueError(f"Cannot {action} repository-managed fields: {sorted(reserved)}")
        unknown = set(data) - self._fields
        if unknown:
            raise ValueError(f"{self._entity_cls.__name__} has no fields {sorted(unknown)}")

    def _new_id(self) -> str:
        entity_id = str(uuid.uuid4())
        while entity_id in self._items:
            entity_id = str(uuid.uuid4())
        return entity_id

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------
    def create(self, data: dict) -> T:
        self._check_fields(data, "set")
        with self._lock:
            now = self._clock()
            entity = self._entity_cls(
                id=self._new_id(),
                created_at=now,
                updated_at=now,
                version=1,
                **copy.deepcopy(data),
            )
            self._items[entity.id] = entity
        logger.debug("Created %s %s", self._entity_cls.__name__, entity.id)
        return copy.deepcopy(entity)

    def find_by_id(self, entity_id: str) -> Optional[T]:
        entity = self._items.get(entity_id)
        return copy.deepcopy(entity) if entity is not None else None

    def find_all(self, filter: Optional[dict] = None) -> List[T]:
        criteria = {k: v for k, v in (filter or {}).items() if v is not None}
        unknown = set(criteria) - self._fields
        if unknown:
            raise ValueError(f"{self._entity_cls.__name__} has no fields {sorted(unknown)}")
        with self._lock:
            snapshot = list(self._items.values())
        return [
            copy.deepcopy(e)
            for e in snapshot
            if all(getattr(e, k) == v for k, v in criteria.items())
        ]

    def update(self, entity_id: str, changes: dict) -> T:
        self._check_fields(changes, "update")
        with self._lock:
            existing = self._items.get(entity_id)
            if existing is None:
                raise NotFoundError(
                    f"{self._entity_cls.__name__} with ID {entity_id} not found",
                    context={"id": entity_id},
                )
            # updated_at never moves backwards, even if the clock does
            updated_at = max(self._clock(), existing.updated_at)
            updated = dataclasses.replace(
                existing,
                **copy.deepcopy(changes),
                updated_at=updated_at,
                version=existing.version + 1,
            )
            self._items[entity_id] = updated
        logger.debug("Updated %s %s to version %d", self._entity_cls.__name__, entity_id, updated.version)
        return copy.deepcopy(updated)

    def delete(self, entity_id: str) -> bool:
        with self._lock:
            removed = self._items.pop(entity_id, None) is not None
        if removed:
            logger.debug("Deleted %s %s", self._entity_cls.__name__, entity_id)
        return removed

    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return self.count()
