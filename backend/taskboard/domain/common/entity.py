"""Base entity types shared by every aggregate stored in a repository."""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime

# Fields owned by the repository; callers never set or patch them.
IDENTITY_FIELDS = frozenset({"id", "created_at", "updated_at", "version"})


@dataclass
class BaseEntity:
    id: str
    created_at: datetime
    updated_at: datetime
    version: int


@dataclass
class AuditableEntity(BaseEntity):
    created_by: str
    updated_by: str
