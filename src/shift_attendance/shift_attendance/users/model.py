from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Worker:
    """Domain entity: an account that can log in (worker or admin).

    Plain data object, no DB access code here.
    """

    worker_id: str
    password_hash: str
    role: Role
    job: Optional[str] = None
    email: Optional[str] = None
    shift_id: Optional[int] = None
