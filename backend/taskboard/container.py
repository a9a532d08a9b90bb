"""Dependency injection container: wires implementations to interfaces."""
from __future__ import annotations
from functools import lru_cache

from taskboard.application.task_app_service import TaskAppService
from taskboard.application.user_app_service import UserAppService
from taskboard.persistence.repositories.memory.task_repository import TaskRepository
from taskboard.persistence.repositories.memory.user_repository import UserRepository


@lru_cache(maxsize=1)
def get_task_repo() -> TaskRepository:
    return TaskRepository()


@lru_cache(maxsize=1)
def get_user_repo() -> UserRepository:
    return UserRepository()


@lru_cache(maxsize=1)
def get_task_app_service() -> TaskAppService:
    return TaskAppService(repo=get_task_repo())


@lru_cache(maxsize=1)
def get_user_app_service() -> UserAppService:
    return UserAppService(repo=get_user_repo())


def reset() -> None:
    """Drop every cached singleton, giving the next caller empty repositories."""
    for factory in (get_task_repo, get_user_repo, get_task_app_service, get_user_app_service):
        factory.cache_clear()
