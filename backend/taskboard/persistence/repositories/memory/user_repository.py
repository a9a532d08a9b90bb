"""In-memory User repository."""
from __future__ import annotations
from datetime import datetime
from typing import Callable, List, Optional

from taskboard.domain.user.models import User
from taskboard.persistence.repositories.memory.memory_repository import InMemoryRepository, _utcnow


class UserRepository(InMemoryRepository[User]):

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        super().__init__(User, clock=clock)

    def find_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive email lookup."""
        wanted = email.strip().lower()
        for user in self.find_all():
            if user.email.lower() == wanted:
                return user
        return None

    def create_with_unique_email(self, data: dict) -> Optional[User]:
        """
        Create the user unless the email is already taken, in which case
        return None. The lookup and the insert share one lock scope.
        """
        with self._lock:
            if self.find_by_email(data["email"]) is not None:
                return None
            return self.create(data)

    def find_by_role(self, role: str, active_only: bool = True) -> List[User]:
        return self.find_all({"role": role, "is_active": True if active_only else None})
