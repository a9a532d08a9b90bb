"""Fluent staging object for task creation requests."""
from __future__ import annotations
from datetime import datetime
from typing import List, Optional

from taskboard.domain.common.errors import ValidationError
from taskboard.domain.task.models import DEFAULT_PRIORITY, DEFAULT_STATUS


class TaskBuilder:
    """
    Collects task fields one call at a time. build() returns a creation
    payload for TaskAppService.create_task, or raises ValidationError when
    the title was never set.
    """

    def __init__(self):
        self._title: Optional[str] = None
        self._description: str = ""
        self._status: str = DEFAULT_STATUS
        self._priority: str = DEFAULT_PRIORITY
        self._assignee_id: str = ""
        self._due_date: Optional[datetime] = None
        self._tags: List[str] = []

    def set_title(self, title: str) -> "TaskBuilder":
        self._title = title
        return self

    def set_description(self, description: str) -> "TaskBuilder":
        self._description = description
        return self

    def set_status(self, status: str) -> "TaskBuilder":
        self._status = status
        return self

    def set_priority(self, priority: str) -> "TaskBuilder":
        self._priority = priority
        return self

    def set_due_date(self, due_date: datetime) -> "TaskBuilder":
        self._due_date = due_date
        return self

    def set_assignee(self, assignee_id: str) -> "TaskBuilder":
        self._assignee_id = assignee_id
        return self

    def add_tag(self, tag: str) -> "TaskBuilder":
        self._tags.append(tag)
        return self

    def build(self) -> dict:
        if not (self._title or "").strip():
            raise ValidationError("Task title is required")
        return {
            "title": self._title,
            "description": self._description,
            "status": self._status,
            "priority": self._priority,
            "assignee_id": self._assignee_id,
            "due_date": self._due_date,
            "tags": list(self._tags),
        }
