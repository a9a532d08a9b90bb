"""Task domain model: pure Python, no storage or HTTP dependencies."""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from taskboard.domain.common.entity import AuditableEntity

# Closed value sets, in display order
TASK_STATUSES = ("pending", "approved", "rejected")
TASK_PRIORITIES = ("low", "medium", "high", "urgent")

DEFAULT_STATUS = "pending"
DEFAULT_PRIORITY = "medium"


@dataclass
class Task(AuditableEntity):
    title: str
    description: str = ""
    status: str = DEFAULT_STATUS  # pending | approved | rejected
    priority: str = DEFAULT_PRIORITY  # low | medium | high | urgent
    assignee_id: str = ""
    due_date: Optional[datetime] = None
    tags: List[str] = field(default_factory=list)
