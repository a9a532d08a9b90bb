"""Application error taxonomy. Each error carries the HTTP-like code it maps to."""
from __future__ import annotations
from typing import Any, Dict, Optional


class AppError(Exception):
    status_code: int = 500
    is_operational: bool = False

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class ValidationError(AppError):
    """A request broke a business rule."""
    status_code = 400
    is_operational = True


class NotFoundError(AppError):
    """The referenced entity does not exist."""
    status_code = 404
    is_operational = True


class ConflictError(AppError):
    """A uniqueness constraint would be violated."""
    status_code = 409
    is_operational = True
