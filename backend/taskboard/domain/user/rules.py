"""Business rules for the User domain."""
from __future__ import annotations
import re

from taskboard.domain.common.errors import ValidationError
from taskboard.domain.common.result import Result
from taskboard.domain.user.models import USER_ROLES

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email) -> bool:
    return isinstance(email, str) and bool(_EMAIL_RE.fullmatch(email))


def validate_user(data: dict) -> Result[None, ValidationError]:
    """Validates a user creation request: email shape, names and role."""
    if not is_valid_email(data.get("email")):
        return Result.fail(ValidationError("Invalid email format"))

    first_name = data.get("first_name") or ""
    last_name = data.get("last_name") or ""
    if not isinstance(first_name, str) or not isinstance(last_name, str):
        return Result.fail(ValidationError("First name and last name must be strings"))
    first_name, last_name = first_name.strip(), last_name.strip()
    if not first_name or not last_name:
        return Result.fail(ValidationError("First name and last name are required"))

    role = data.get("role", "employee")
    if role not in USER_ROLES:
        return Result.fail(ValidationError(f"'{role}' is not a valid role. Must be one of {USER_ROLES}."))

    return Result.ok()
