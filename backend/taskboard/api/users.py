"""User API endpoints."""
from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from taskboard.api.common import actor_header, unwrap_or_raise
from taskboard.application.user_app_service import UserAppService
from taskboard.container import get_user_app_service
from taskboard.domain.user.models import User

router = APIRouter(prefix="/users", tags=["users"])


class UserCreateBody(BaseModel):
    email: str
    first_name: str
    last_name: str
    role: str = "employee"


def _serialize_user(u: User) -> dict:
    return {
        "id": u.id,
        "email": u.email,
        "first_name": u.first_name,
        "last_name": u.last_name,
        "role": u.role,
        "is_active": u.is_active,
        "version": u.version,
        "created_at": u.created_at.isoformat(),
        "updated_at": u.updated_at.isoformat(),
        "created_by": u.created_by,
        "updated_by": u.updated_by,
    }


@router.get("/")
def list_users(
    role: Optional[str] = None,
    is_active: Optional[bool] = None,
    svc: UserAppService = Depends(get_user_app_service),
):
    return [_serialize_user(u) for u in svc.list_users(role=role, is_active=is_active)]


@router.get("/metrics")
def user_metrics(svc: UserAppService = Depends(get_user_app_service)):
    return svc.get_user_metrics()


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreateBody,
    svc: UserAppService = Depends(get_user_app_service),
    actor_id: Optional[str] = Depends(actor_header),
):
    result = svc.create_user(body.model_dump(), actor_id=actor_id)
    return _serialize_user(unwrap_or_raise(result))


@router.get("/{user_id}")
def get_user(user_id: str, svc: UserAppService = Depends(get_user_app_service)):
    user = svc.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail=f"User with ID {user_id} not found")
    return _serialize_user(user)


@router.post("/{user_id}/deactivate")
def deactivate_user(
    user_id: str,
    svc: UserAppService = Depends(get_user_app_service),
    actor_id: Optional[str] = Depends(actor_header),
):
    result = svc.deactivate_user(user_id, performed_by=actor_id)
    return _serialize_user(unwrap_or_raise(result))
