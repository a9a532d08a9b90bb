"""Application service: orchestrates validate -> persist -> Result for tasks."""
from __future__ import annotations
import logging
from typing import List, Optional

from taskboard.core.config import DEFAULT_ACTOR, STRICT_STATUS_TRANSITIONS, TASK_TITLE_MAX_LENGTH
from taskboard.domain.common.errors import AppError, NotFoundError, ValidationError
from taskboard.domain.common.result import Result
from taskboard.domain.task.models import DEFAULT_PRIORITY, DEFAULT_STATUS, TASK_PRIORITIES, TASK_STATUSES, Task
from taskboard.domain.task.rules import validate_status_transition, validate_task, validate_title
from taskboard.persistence.repositories.memory.task_repository import TaskRepository

logger = logging.getLogger(__name__)

# Fields a caller may patch through update_task
EDITABLE_FIELDS = frozenset({"title", "description", "status", "priority", "assignee_id", "due_date", "tags"})

# Clearing one of these stores its empty value instead of None
CLEARED_VALUES = {"description": "", "assignee_id": "", "tags": []}


def _internal_error(op: str) -> Result:
    logger.exception("Unexpected error in %s", op)
    return Result.fail(AppError(f"Unexpected error in {op}"), code=500)


class TaskAppService:
    def __init__(
        self,
        repo: TaskRepository,
        actor_id: str = DEFAULT_ACTOR,
        strict_transitions: bool = STRICT_STATUS_TRANSITIONS,
        max_title_length: int = TASK_TITLE_MAX_LENGTH,
    ):
        self._repo = repo
        self._actor_id = actor_id
        self._strict = strict_transitions
        self._max_title_length = max_title_length

    # ------------------------------------------------------------------
    # CREATE
    # ------------------------------------------------------------------
    def create_task(self, data: dict, actor_id: Optional[str] = None) -> Result[Task, AppError]:
        try:
            return self._create_task(data, actor_id or self._actor_id)
        except Exception:
            return _internal_error("create_task")

    def _create_task(self, data: dict, actor: str) -> Result[Task, AppError]:
        validation = validate_task(data, self._max_title_length)
        if not validation.is_success:
            logger.warning("Rejected task: %s", validation.error)
            return validation

        task = self._repo.create({
            "title": data["title"].strip(),
            "description": data.get("description") or "",
            "status": data.get("status") or DEFAULT_STATUS,
            "priority": data.get("priority") or DEFAULT_PRIORITY,
            "assignee_id": data.get("assignee_id") or "",
            "due_date": data.get("due_date"),
            "tags": list(data.get("tags") or []),
            "created_by": actor,
            "updated_by": actor,
        })
        logger.info("Task %s created by %s", task.id, actor)
        return Result.ok(task, message="Task created successfully")

    # ------------------------------------------------------------------
    # READ
    # ------------------------------------------------------------------
    def get_task(self, task_id: str) -> Optional[Task]:
        return self._repo.find_by_id(task_id)

    def list_tasks(
        self,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        assignee_id: Optional[str] = None,
    ) -> List[Task]:
        return self._repo.find_all({"status": status, "priority": priority, "assignee_id": assignee_id})

    # ------------------------------------------------------------------
    # UPDATE
    # ------------------------------------------------------------------
    def update_task_status(self, task_id: str, new_status: str, actor_id: Optional[str] = None) -> Result[Task, AppError]:
        return self.update_task(task_id, {"status": new_status}, actor_id)

    def update_task(self, task_id: str, changes: dict, actor_id: Optional[str] = None) -> Result[Task, AppError]:
        """
        Patch a task. Keys left out stay unchanged; a key given as None clears
        that field (title, status and priority cannot be cleared).
        """
        try:
            return self._update_task(task_id, changes, actor_id or self._actor_id)
        except Exception:
            return _internal_error("update_task")

    def _update_task(self, task_id: str, changes: dict, actor: str) -> Result[Task, AppError]:
        task = self._repo.find_by_id(task_id)
        if task is None:
            return Result.fail(NotFoundError(f"Task with ID {task_id} not found", context={"id": task_id}))

        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            return Result.fail(ValidationError(f"Fields cannot be updated: {sorted(unknown)}"))

        if "title" in changes:
            check = validate_title(changes["title"], self._max_title_length)
            if not check.is_success:
                return check
        if "priority" in changes and changes["priority"] not in TASK_PRIORITIES:
            return Result.fail(ValidationError(f"'{changes['priority']}' is not a valid priority. Must be one of {TASK_PRIORITIES}."))
        if "status" in changes:
            check = validate_status_transition(task.status, changes["status"], self._strict)
            if not check.is_success:
                logger.warning("Rejected status change for task %s: %s", task_id, check.error)
                return check

        patch = {k: (CLEARED_VALUES.get(k, v) if v is None else v) for k, v in changes.items()}
        if "title" in patch:
            patch["title"] = patch["title"].strip()
        try:
            updated = self._repo.update(task_id, {**patch, "updated_by": actor})
        except NotFoundError as e:
            # deleted between the lookup and the update
            return Result.fail(e)

        logger.info("Task %s updated to version %d by %s", task_id, updated.version, actor)
        return Result.ok(updated)

    # ------------------------------------------------------------------
    # DELETE
    # ------------------------------------------------------------------
    def delete_task(self, task_id: str) -> Result[bool, AppError]:
        if not self._repo.delete(task_id):
            return Result.fail(NotFoundError(f"Task with ID {task_id} not found", context={"id": task_id}))
        logger.info("Task %s deleted", task_id)
        return Result.ok(True)

    # ------------------------------------------------------------------
    # METRICS
    # ------------------------------------------------------------------
    def get_task_metrics(self) -> dict:
        by_status = {s: 0 for s in TASK_STATUSES}
        by_priority = {p: 0 for p in TASK_PRIORITIES}
        tasks = self._repo.find_all()
        for task in tasks:
            by_status[task.status] = by_status.get(task.status, 0) + 1
            by_priority[task.priority] = by_priority.get(task.priority, 0) + 1
        return {"total": len(tasks), "by_status": by_status, "by_priority": by_priority}
