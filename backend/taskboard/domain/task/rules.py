"""Business rules for the Task domain: request validation and status transitions."""
from __future__ import annotations
from typing import Optional

from taskboard.core.config import STRICT_STATUS_TRANSITIONS, TASK_TITLE_MAX_LENGTH
from taskboard.domain.common.errors import ValidationError
from taskboard.domain.common.result import Result
from taskboard.domain.task.models import TASK_PRIORITIES, TASK_STATUSES

# Transitions accepted under the strict policy; terminal states have no entry
STRICT_TRANSITIONS: dict[str, set[str]] = {
    "pending": {"approved", "rejected"},
}


def validate_title(title: Optional[str], max_length: int = TASK_TITLE_MAX_LENGTH) -> Result[None, ValidationError]:
    if title is not None and not isinstance(title, str):
        return Result.fail(ValidationError("Task title must be a string"))
    title = (title or "").strip()
    if not title:
        return Result.fail(ValidationError("Task title is required"))
    if len(title) > max_length:
        return Result.fail(
            ValidationError(
                f"Task title must be at most {max_length} characters",
                context={"length": len(title)},
            )
        )
    return Result.ok()


def validate_task(data: dict, max_title_length: int = TASK_TITLE_MAX_LENGTH) -> Result[None, ValidationError]:
    """Validates a task creation request."""
    title_check = validate_title(data.get("title"), max_title_length)
    if not title_check.is_success:
        return title_check

    priority = data.get("priority")
    if priority is not None and priority not in TASK_PRIORITIES:
        return Result.fail(ValidationError(f"'{priority}' is not a valid priority. Must be one of {TASK_PRIORITIES}."))

    status = data.get("status")
    if status is not None and status not in TASK_STATUSES:
        return Result.fail(ValidationError(f"'{status}' is not a valid status. Must be one of {TASK_STATUSES}."))

    return Result.ok()


def validate_status_transition(
    current_status: str,
    new_status: str,
    strict: bool = STRICT_STATUS_TRANSITIONS,
) -> Result[str, ValidationError]:
    """
    Any known status may follow any other unless strict is set, in which case
    only pending -> approved | rejected is accepted.
    Returns Result.ok(new_status) or Result.fail(ValidationError).
    """
    if new_status not in TASK_STATUSES:
        return Result.fail(ValidationError(f"'{new_status}' is not a valid status. Must be one of {TASK_STATUSES}."))

    if not strict:
        return Result.ok(new_status)

    allowed = STRICT_TRANSITIONS.get(current_status)
    if not allowed:
        return Result.fail(
            ValidationError(f"Task is already in terminal status '{current_status}'. No further transitions allowed.")
        )
    if new_status not in allowed:
        return Result.fail(
            ValidationError(
                f"Invalid transition: '{current_status}' -> '{new_status}'. "
                f"Allowed: {sorted(allowed)}."
            )
        )
    return Result.ok(new_status)
