from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import format_civil, format_date
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one worker's attendance for one work date.

    ``work_date`` is the date the shift started on, which for an overnight
    shift is not the date of the check-out. ``shift_start_time`` and
    ``shift_end_time`` are the shift times frozen at check-in.
    """

    attendance_id: int
    worker_id: str
    work_date: date
    checkin_time: datetime
    checkout_time: Optional[datetime]
    shift_id: Optional[int]
    shift_start_time: time
    shift_end_time: time
    status: AttendanceStatus
    hours_worked: Optional[Decimal] = None
    overtime_hours: Optional[Decimal] = None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "worker_id": self.worker_id,
            "work_date": format_date(self.work_date),
            "checkin_time": format_civil(self.checkin_time),
            "checkout_time": format_civil(self.checkout_time),
            "shift_id": self.shift_id,
            "status": self.status.value,
            "hours_worked": _num(self.hours_worked),
            "overtime_hours": _num(self.overtime_hours),
        }


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for reports and payroll (record joined with the user)."""

    worker_id: str
    job: Optional[str]
    role: Optional[str]
    work_date: date
    checkin_time: datetime
    checkout_time: Optional[datetime]
    status: AttendanceStatus
    hours_worked: Optional[Decimal] = None
    overtime_hours: Optional[Decimal] = None

    def to_dict(self) -> dict:
        return {
            "worker_id": self.worker_id,
            "job": self.job,
            "role": self.role,
            "work_date": format_date(self.work_date),
            "checkin_time": format_civil(self.checkin_time),
            "checkout_time": format_civil(self.checkout_time),
            "status": self.status.value,
            "hours_worked": _num(self.hours_worked),
            "overtime_hours": _num(self.overtime_hours),
        }


@dataclass(frozen=True)
class CheckInResult:
    worker_id: str
    shift_name: str
    status: AttendanceStatus
    work_date: date
    checkin_time: datetime

    def to_dict(self) -> dict:
        return {
            "message": f"Check-in successful ({self.shift_name})",
            "success": True,
            "shift_name": self.shift_name,
            "status": self.status.value,
            "work_date": format_date(self.work_date),
            "checkin_time": format_civil(self.checkin_time),
        }


@dataclass(frozen=True)
class CheckOutResult:
    worker_id: str
    checkin_time: datetime
    checkout_time: datetime
    hours_worked: Decimal
    overtime_hours: Decimal
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {
            "message": "Check-out successful",
            "success": True,
            "checkin_time": format_civil(self.checkin_time),
            "checkout_time": format_civil(self.checkout_time),
            "hours_worked": float(self.hours_worked),
            "overtime_hours": float(self.overtime_hours),
            "status": self.status.value,
        }


def _num(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None
