from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional, Sequence

import mysql.connector

from ..core.enums import AttendanceStatus
from ..core.exceptions import AlreadyCheckedInError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time, to_decimal
from .model import AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository

_COLUMNS = """
    a.id, a.worker_id, a.work_date, a.checkin_time, a.checkout_time, a.shift_id,
    a.shift_start_time, a.shift_end_time, a.status, a.hours_worked, a.overtime_hours
"""


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["id"]),
        worker_id=str(r["worker_id"]),
        work_date=r["work_date"],
        checkin_time=r["checkin_time"],
        checkout_time=r.get("checkout_time"),
        shift_id=int(r["shift_id"]) if r.get("shift_id") is not None else None,
        shift_start_time=normalize_mysql_time(r["shift_start_time"]),
        shift_end_time=normalize_mysql_time(r["shift_end_time"]),
        status=AttendanceStatus(r["status"]),
        hours_worked=to_decimal(r.get("hours_worked")),
        overtime_hours=to_decimal(r.get("overtime_hours")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_open_session(self, worker_id: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance a
                WHERE a.worker_id=%s AND a.checkout_time IS NULL
                ORDER BY a.id DESC
                LIMIT 1
                """,
                (worker_id,),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def find_by_worker_and_date(self, worker_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance a
                WHERE a.worker_id=%s AND a.work_date=%s
                """,
                (worker_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def insert(
        self,
        *,
        worker_id: str,
        work_date: date,
        checkin_time: datetime,
        shift_id: Optional[int],
        shift_start_time: time,
        shift_end_time: time,
        status: AttendanceStatus,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO attendance
                        (worker_id, work_date, checkin_time, shift_id, shift_start_time, shift_end_time, status)
                    VALUES (%s, %s, %s, %s, %s, %s, %s)
                    """,
                    (worker_id, work_date, checkin_time, shift_id, shift_start_time, shift_end_time, status.value),
                )
            except mysql.connector.IntegrityError as e:
                # uq_attendance_worker_date lost a race with a concurrent check-in
                raise AlreadyCheckedInError("Already checked in today") from e
            return int(cur.lastrowid)

    def update_checkout(
        self,
        *,
        attendance_id: int,
        checkout_time: datetime,
        hours_worked: Decimal,
        overtime_hours: Decimal,
        status: AttendanceStatus,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET checkout_time=%s, hours_worked=%s, overtime_hours=%s, status=%s
                WHERE id=%s AND checkout_time IS NULL
                """,
                (checkout_time, hours_worked, overtime_hours, status.value, int(attendance_id)),
            )
            return int(cur.rowcount)

    def list_for_worker(self, worker_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance a
                WHERE a.worker_id=%s
                ORDER BY a.work_date DESC
                """,
                (worker_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_report_rows(
        self,
        *,
        worker_id: Optional[str] = None,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> Sequence[AttendanceReportRow]:
        clauses = ["1=1"]
        params: list[object] = []

        if worker_id:
            clauses.append("a.worker_id=%s")
            params.append(worker_id)
        if month and year:
            clauses.append("MONTH(a.work_date)=%s AND YEAR(a.work_date)=%s")
            params.extend([int(month), int(year)])

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    a.worker_id, u.job, u.role,
                    a.work_date, a.checkin_time, a.checkout_time, a.status,
                    a.hours_worked, a.overtime_hours
                FROM attendance a
                JOIN users u ON a.worker_id = u.worker_id
                WHERE {where}
                ORDER BY a.work_date DESC, a.checkin_time ASC
                """,
                tuple(params),
            )
            return [
                AttendanceReportRow(
                    worker_id=str(r["worker_id"]),
                    job=r.get("job"),
                    role=r.get("role"),
                    work_date=r["work_date"],
                    checkin_time=r["checkin_time"],
                    checkout_time=r.get("checkout_time"),
                    status=AttendanceStatus(r["status"]),
                    hours_worked=to_decimal(r.get("hours_worked")),
                    overtime_hours=to_decimal(r.get("overtime_hours")),
                )
                for r in fetchall(cur)
            ]

    def list_worker_ids_with_record(self, work_date: date) -> set[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT DISTINCT worker_id FROM attendance WHERE work_date=%s", (work_date,))
            return {str(r["worker_id"]) for r in fetchall(cur)}
