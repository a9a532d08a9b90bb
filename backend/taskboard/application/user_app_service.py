"""Application service for users: validation, email uniqueness, deactivation."""
from __future__ import annotations
import logging
from typing import List, Optional

from taskboard.core.config import DEFAULT_ACTOR
from taskboard.domain.common.errors import AppError, ConflictError, NotFoundError
from taskboard.domain.common.result import Result
from taskboard.domain.user.models import USER_ROLES, User
from taskboard.domain.user.rules import validate_user
from taskboard.persistence.repositories.memory.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserAppService:
    def __init__(self, repo: UserRepository, actor_id: str = DEFAULT_ACTOR):
        self._repo = repo
        self._actor_id = actor_id

    def create_user(self, data: dict, actor_id: Optional[str] = None) -> Result[User, AppError]:
        try:
            return self._create_user(data, actor_id or self._actor_id)
        except Exception:
            logger.exception("Unexpected error in create_user")
            return Result.fail(AppError("Unexpected error in create_user"), code=500)

    def _create_user(self, data: dict, actor: str) -> Result[User, AppError]:
        validation = validate_user(data)
        if not validation.is_success:
            logger.warning("Rejected user: %s", validation.error)
            return validation

        email = data["email"].strip()
        user = self._repo.create_with_unique_email({
            "email": email,
            "first_name": data["first_name"].strip(),
            "last_name": data["last_name"].strip(),
            "role": data.get("role", "employee"),
            "is_active": True,
            "created_by": actor,
            "updated_by": actor,
        })
        if user is None:
            logger.warning("Rejected user: email %s already exists", email)
            return Result.fail(ConflictError("Email already exists", context={"email": email}), code=409)

        logger.info("User %s created by %s", user.id, actor)
        return Result.ok(user, message="User created successfully")

    def get_user(self, user_id: str) -> Optional[User]:
        return self._repo.find_by_id(user_id)

    def list_users(self, role: Optional[str] = None, is_active: Optional[bool] = None) -> List[User]:
        return self._repo.find_all({"role": role, "is_active": is_active})

    def get_users_by_role(self, role: str) -> List[User]:
        return self._repo.find_by_role(role, active_only=True)

    def deactivate_user(self, user_id: str, performed_by: Optional[str] = None) -> Result[User, AppError]:
        if self._repo.find_by_id(user_id) is None:
            return Result.fail(NotFoundError(f"User with ID {user_id} not found", context={"id": user_id}))

        actor = performed_by or self._actor_id
        try:
            user = self._repo.update(user_id, {"is_active": False, "updated_by": actor})
        except NotFoundError as e:
            return Result.fail(e)
        except Exception:
            logger.exception("Unexpected error in deactivate_user")
            return Result.fail(AppError("Unexpected error in deactivate_user"), code=500)

        logger.info("User %s deactivated by %s", user_id, actor)
        return Result.ok(user)

    def get_user_metrics(self) -> dict:
        by_role = {r: 0 for r in USER_ROLES}
        users = self._repo.find_all()
        for user in users:
            by_role[user.role] = by_role.get(user.role, 0) + 1
        return {
            "total": len(users),
            "active": sum(1 for u in users if u.is_active),
            "by_role": by_role,
        }
