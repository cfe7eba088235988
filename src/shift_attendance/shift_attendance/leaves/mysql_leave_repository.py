from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LeaveRequest
from .repository import LeaveRepository


def _to_leave(r: dict) -> LeaveRequest:
    return LeaveRequest(
        request_id=int(r["id"]),
        worker_id=str(r["worker_id"]),
        reason=r["reason"],
        from_date=r["from_date"],
        to_date=r["to_date"],
        status=RequestStatus(r["status"]),
        created_at=r.get("created_at"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_leave(self, *, worker_id: str, reason: str, from_date: date, to_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests (worker_id, reason, from_date, to_date, status)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (worker_id, reason, from_date, to_date, RequestStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def get_leave(self, request_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, worker_id, reason, from_date, to_date, status, created_at
                FROM leave_requests
                WHERE id=%s
                """,
                (int(request_id),),
            )
            r = fetchone(cur)
            return _to_leave(r) if r else None

    def list_leave_requests(self) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, worker_id, reason, from_date, to_date, status, created_at
                FROM leave_requests
                ORDER BY id DESC
                """
            )
            return [_to_leave(r) for r in fetchall(cur)]

    def decide_leave(self, *, request_id: int, status: RequestStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE leave_requests SET status=%s WHERE id=%s AND status=%s",
                (status.value, int(request_id), RequestStatus.PENDING.value),
            )
            return int(cur.rowcount)
