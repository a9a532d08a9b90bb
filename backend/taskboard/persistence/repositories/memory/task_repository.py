"""In-memory Task repository with the lookups the task service needs."""
from __future__ import annotations
from datetime import datetime
from typing import Callable, List

from taskboard.domain.task.models import Task
from taskboard.persistence.repositories.memory.memory_repository import InMemoryRepository, _utcnow


class TaskRepository(InMemoryRepository[Task]):

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        super().__init__(Task, clock=clock)

    def find_by_status(self, status: str) -> List[Task]:
        return self.find_all({"status": status})

    def find_by_assignee(self, assignee_id: str) -> List[Task]:
        return self.find_all({"assignee_id": assignee_id})
