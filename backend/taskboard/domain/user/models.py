"""User domain model."""
from __future__ import annotations
from dataclasses import dataclass

from taskboard.domain.common.entity import AuditableEntity

USER_ROLES = ("employee", "manager", "admin")


@dataclass
class User(AuditableEntity):
    email: str
    first_name: str
    last_name: str
    role: str = "employee"
    is_active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
