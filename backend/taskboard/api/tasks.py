"""Task CRUD + status API endpoints."""
from __future__ import annotations
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from taskboard.api.common import actor_header, unwrap_or_raise
from taskboard.application.task_app_service import TaskAppService
from taskboard.container import get_task_app_service
from taskboard.domain.task.models import Task

router = APIRouter(prefix="/tasks", tags=["tasks"])


# ------------------------------------------------------------------
# Pydantic schemas
# ------------------------------------------------------------------
class TaskCreateBody(BaseModel):
    title: str
    description: str = ""
    status: Optional[str] = None
    priority: Optional[str] = None
    assignee_id: str = ""
    due_date: Optional[datetime] = None
    tags: List[str] = []


class TaskPatchBody(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    assignee_id: Optional[str] = None
    due_date: Optional[datetime] = None
    tags: Optional[List[str]] = None


class StatusChangeBody(BaseModel):
    new_status: str


# ------------------------------------------------------------------
# Serializers
# ------------------------------------------------------------------
def _serialize_task(t: Task) -> dict:
    return {
        "id": t.id,
        "title": t.title,
        "description": t.description,
        "status": t.status,
        "priority": t.priority,
        "assignee_id": t.assignee_id,
        "due_date": t.due_date.isoformat() if t.due_date else None,
        "tags": t.tags,
        "version": t.version,
        "created_at": t.created_at.isoformat(),
        "updated_at": t.updated_at.isoformat(),
        "created_by": t.created_by,
        "updated_by": t.updated_by,
    }


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------
@router.get("/")
def list_tasks(
    status: Optional[str] = None,
    priority: Optional[str] = None,
    assignee_id: Optional[str] = None,
    svc: TaskAppService = Depends(get_task_app_service),
):
    tasks = svc.list_tasks(status=status, priority=priority, assignee_id=assignee_id)
    return [_serialize_task(t) for t in tasks]


@router.get("/metrics")
def task_metrics(svc: TaskAppService = Depends(get_task_app_service)):
    return svc.get_task_metrics()


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_task(
    body: TaskCreateBody,
    svc: TaskAppService = Depends(get_task_app_service),
    actor_id: Optional[str] = Depends(actor_header),
):
    result = svc.create_task(body.model_dump(), actor_id=actor_id)
    return _serialize_task(unwrap_or_raise(result))


@router.get("/{task_id}")
def get_task(task_id: str, svc: TaskAppService = Depends(get_task_app_service)):
    task = svc.get_task(task_id)
    if not task:
        raise HTTPException(status_code=404, detail=f"Task with ID {task_id} not found")
    return _serialize_task(task)


@router.patch("/{task_id}")
def update_task(
    task_id: str,
    body: TaskPatchBody,
    svc: TaskAppService = Depends(get_task_app_service),
    actor_id: Optional[str] = Depends(actor_header),
):
    # Only the fields the client actually sent; an explicit null clears
    changes = body.model_dump(exclude_unset=True)
    result = svc.update_task(task_id, changes, actor_id=actor_id)
    return _serialize_task(unwrap_or_raise(result))


@router.post("/{task_id}/status")
def change_status(
    task_id: str,
    body: StatusChangeBody,
    svc: TaskAppService = Depends(get_task_app_service),
    actor_id: Optional[str] = Depends(actor_header),
):
    result = svc.update_task_status(task_id, body.new_status, actor_id=actor_id)
    return _serialize_task(unwrap_or_raise(result))


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, svc: TaskAppService = Depends(get_task_app_service)):
    unwrap_or_raise(svc.delete_task(task_id))
