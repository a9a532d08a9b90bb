"""Helpers shared by the API routers."""
from __future__ import annotations
from typing import Optional

from fastapi import Header, HTTPException

from taskboard.domain.common.result import Result


def actor_header(x_actor_id: Optional[str] = Header(default=None)) -> Optional[str]:
    """The acting user, taken from the X-Actor-Id header when present."""
    return x_actor_id


def unwrap_or_raise(result: Result):
    """Return the success value, or raise HTTPException with the failure's code."""
    if not result.is_success:
        detail = getattr(result.error, "message", None) or str(result.error)
        raise HTTPException(status_code=result.code or 500, detail=detail)
    return result.value
