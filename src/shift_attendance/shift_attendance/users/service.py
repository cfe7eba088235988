from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import optional_str, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What the client keeps after login."""

    worker_id: str
    role: Role
    job: Optional[str]
    email: Optional[str]


def _parse_shift_id(value) -> Optional[int]:
    if value in (None, ""):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError("shift_id must be an integer")


def require_admin(current_role, action: str = "do this") -> None:
    if current_role != Role.ADMIN.value:
        raise AuthorizationError(f"Only admin can {action}")


class AuthService:
    """Use case: authenticate a worker or admin (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, worker_id: str, password: str) -> SessionUser:
        user = self._users.get_by_id((worker_id or "").strip())
        if not user:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # placeholder or corrupted hash in the users table
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")

        return SessionUser(worker_id=user.worker_id, role=user.role, job=user.job, email=user.email)


class UserService:
    """Use case: manage accounts (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def add_user(
        self,
        *,
        current_role: str,
        worker_id: str,
        password: str,
        role: str,
        job: Optional[str] = None,
        email: Optional[str] = None,
        shift_id: Optional[int] = None,
    ) -> None:
        worker_id = require_non_empty(worker_id, "worker_id")
        password = require_non_empty(password, "password")
        role_s = require_non_empty(role, "role")
        require_admin(current_role, "add users")

        try:
            new_role = Role(role_s)
        except ValueError:
            raise ValidationError(f"Invalid role: {role_s}")

        if self._users.get_by_id(worker_id):
            raise ValidationError(f"User {worker_id} already exists")

        self._users.create_user(
            worker_id=worker_id,
            password_hash=generate_password_hash(password),
            role=new_role,
            job=optional_str(job),
            email=optional_str(email),
            shift_id=_parse_shift_id(shift_id),
        )
        logger.info("User %s added (role=%s)", worker_id, new_role.value)

    def remove_user(self, *, current_role: str, worker_id: str) -> None:
        require_admin(current_role, "delete users")

        if self._users.delete_by_id(worker_id) == 0:
            raise NotFoundError("User not found")
        logger.info("User %s removed", worker_id)

    def list_workers(self):
        return self._users.list_workers()
