from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector

from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Worker
from .repository import UserRepository

_COLUMNS = "u.worker_id, u.password_hash, u.role, u.job, u.email, u.shift_id"


def _to_worker(r: dict) -> Worker:
    return Worker(
        worker_id=str(r["worker_id"]),
        password_hash=r["password_hash"],
        role=Role(r["role"]),
        job=r.get("job"),
        email=r.get("email"),
        shift_id=int(r["shift_id"]) if r.get("shift_id") is not None else None,
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users u WHERE u.worker_id=%s", (worker_id,))
            r = fetchone(cur)
            return _to_worker(r) if r else None

    def create_user(
        self,
        *,
        worker_id: str,
        password_hash: str,
        role: Role,
        job: Optional[str],
        email: Optional[str],
        shift_id: Optional[int],
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO users (worker_id, password_hash, role, job, email, shift_id)
                    VALUES (%s, %s, %s, %s, %s, %s)
                    """,
                    (worker_id, password_hash, role.value, job, email, shift_id),
                )
            except mysql.connector.IntegrityError as e:
                raise ValidationError(f"Cannot add user {worker_id}: {e.msg}") from e

    def delete_by_id(self, worker_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute("DELETE FROM users WHERE worker_id=%s", (worker_id,))
            except mysql.connector.IntegrityError as e:
                raise ValidationError(f"User {worker_id} has attendance or leave history and cannot be removed") from e
            return int(cur.rowcount)

    def list_workers(self) -> Sequence[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users u WHERE u.role='worker' ORDER BY u.worker_id")
            return [_to_worker(r) for r in fetchall(cur)]

    def list_workers_on_shift(self, shift_name: str) -> Sequence[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM users u
                JOIN shifts s ON u.shift_id = s.id
                WHERE u.role='worker' AND s.shift_name=%s
                ORDER BY u.worker_id
                """,
                (shift_name,),
            )
            return [_to_worker(r) for r in fetchall(cur)]
