from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceReportRow


class AttendanceRepository(Protocol):
    def find_open_session(self, worker_id: str) -> Optional[AttendanceRecord]:
        """Most recent record of the worker with no checkout yet."""

        raise NotImplementedError

    def find_by_worker_and_date(self, worker_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

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
        """Create an open session.

        Raises AlreadyCheckedInError when (worker_id, work_date) is taken.
        """

        raise NotImplementedError

    def update_checkout(
        self,
        *,
        attendance_id: int,
        checkout_time: datetime,
        hours_worked: Decimal,
        overtime_hours: Decimal,
        status: AttendanceStatus,
    ) -> int:
        """Close one still-open record; returns the affected row count."""

        raise NotImplementedError

    def list_for_worker(self, worker_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_report_rows(
        self,
        *,
        worker_id: Optional[str] = None,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> Sequence[AttendanceReportRow]:
        raise NotImplementedError

    def list_worker_ids_with_record(self, work_date: date) -> set[str]:
        raise NotImplementedError
