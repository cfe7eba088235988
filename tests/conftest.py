from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.shift_attendance.shift_attendance.attendance.model import AttendanceRecord, AttendanceReportRow
from src.shift_attendance.shift_attendance.attendance.service import AttendanceService
from src.shift_attendance.shift_attendance.common.datetime_utils import FixedClock
from src.shift_attendance.shift_attendance.core.enums import AttendanceStatus, RequestStatus, Role
from src.shift_attendance.shift_attendance.core.exceptions import AlreadyCheckedInError
from src.shift_attendance.shift_attendance.leaves.model import LeaveRequest
from src.shift_attendance.shift_attendance.shifts.model import Shift
from src.shift_attendance.shift_attendance.shifts.resolver import ShiftResolver
from src.shift_attendance.shift_attendance.users.model import Worker

DAY_SHIFT = Shift(shift_id=1, shift_name="Shift 1", start_time=time(9, 0), end_time=time(17, 0))
NIGHT_SHIFT = Shift(shift_id=2, shift_name="Shift 2", start_time=time(22, 0), end_time=time(6, 0))


class InMemoryShifts:
    def __init__(self, shifts: list[Shift], assignments: dict[str, int]):
        self.shifts = {s.shift_id: s for s in shifts}
        self.assignments = dict(assignments)

    def get_for_worker(self, worker_id: str) -> Optional[Shift]:
        shift_id = self.assignments.get(worker_id)
        return self.shifts.get(shift_id) if shift_id else None


class InMemoryUsers:
    def __init__(self, workers: list[Worker], shifts: InMemoryShifts):
        self.by_id = {w.worker_id: w for w in workers}
        self._shifts = shifts

    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        return self.by_id.get(worker_id)

    def create_user(self, *, worker_id, password_hash, role, job, email, shift_id) -> None:
        self.by_id[worker_id] = Worker(worker_id, password_hash, role, job, email, shift_id)

    def delete_by_id(self, worker_id: str) -> int:
        return 1 if self.by_id.pop(worker_id, None) else 0

    def list_workers(self):
        return [w for w in sorted(self.by_id.values(), key=lambda w: w.worker_id) if w.role == Role.WORKER]

    def list_workers_on_shift(self, shift_name: str):
        ids = {s.shift_id for s in self._shifts.shifts.values() if s.shift_name == shift_name}
        return [w for w in self.list_workers() if w.shift_id in ids]


class InMemoryAttendance:
    """Mirrors the MySQL constraints: unique (worker, work_date), single-row updates."""

    def __init__(self, jobs: Optional[dict[str, str]] = None):
        self.records: dict[int, AttendanceRecord] = {}
        self.jobs = jobs or {}
        self._id = 0
        self.insert_calls = 0

    def find_open_session(self, worker_id: str):
        open_ = [r for r in self.records.values() if r.worker_id == worker_id and r.checkout_time is None]
        return max(open_, key=lambda r: r.attendance_id) if open_ else None

    def find_by_worker_and_date(self, worker_id: str, work_date: date):
        return next((r for r in self.records.values() if r.worker_id == worker_id and r.work_date == work_date), None)

    def insert(self, *, worker_id, work_date, checkin_time, shift_id, shift_start_time, shift_end_time, status) -> int:
        self.insert_calls += 1
        if any(r.worker_id == worker_id and r.work_date == work_date for r in self.records.values()):
            raise AlreadyCheckedInError("Already checked in today")
        self._id += 1
        self.records[self._id] = AttendanceRecord(
            attendance_id=self._id,
            worker_id=worker_id,
            work_date=work_date,
            checkin_time=checkin_time,
            checkout_time=None,
            shift_id=shift_id,
            shift_start_time=shift_start_time,
            shift_end_time=shift_end_time,
            status=status,
        )
        return self._id

    def update_checkout(self, *, attendance_id, checkout_time, hours_worked, overtime_hours, status) -> int:
        rec = self.records.get(attendance_id)
        if not rec or rec.checkout_time is not None:
            return 0
        self.records[attendance_id] = AttendanceRecord(
            attendance_id=rec.attendance_id,
            worker_id=rec.worker_id,
            work_date=rec.work_date,
            checkin_time=rec.checkin_time,
            checkout_time=checkout_time,
            shift_id=rec.shift_id,
            shift_start_time=rec.shift_start_time,
            shift_end_time=rec.shift_end_time,
            status=status,
            hours_worked=hours_worked,
            overtime_hours=overtime_hours,
        )
        return 1

    def list_for_worker(self, worker_id: str):
        rows = [r for r in self.records.values() if r.worker_id == worker_id]
        return sorted(rows, key=lambda r: r.work_date, reverse=True)

    def get_report_rows(self, *, worker_id=None, month=None, year=None):
        rows = []
        for r in self.records.values():
            if worker_id and r.worker_id != worker_id:
                continue
            if month and year and (r.work_date.month != month or r.work_date.year != year):
                continue
            rows.append(
                AttendanceReportRow(
                    worker_id=r.worker_id,
                    job=self.jobs.get(r.worker_id),
                    role="worker",
                    work_date=r.work_date,
                    checkin_time=r.checkin_time,
                    checkout_time=r.checkout_time,
                    status=r.status,
                    hours_worked=r.hours_worked,
                    overtime_hours=r.overtime_hours,
                )
            )
        return sorted(rows, key=lambda x: x.work_date, reverse=True)

    def list_worker_ids_with_record(self, work_date: date) -> set[str]:
        return {r.worker_id for r in self.records.values() if r.work_date == work_date}

    def add_closed(self, worker_id, work_date, status, hours="8.00", overtime="0.00"):
        """Seed a finished record directly (reports/payroll tests)."""
        self._id += 1
        self.records[self._id] = AttendanceRecord(
            attendance_id=self._id,
            worker_id=worker_id,
            work_date=work_date,
            checkin_time=datetime.combine(work_date, time(9, 0)),
            checkout_time=datetime.combine(work_date, time(17, 0)),
            shift_id=1,
            shift_start_time=time(9, 0),
            shift_end_time=time(17, 0),
            status=status,
            hours_worked=Decimal(hours) if hours is not None else None,
            overtime_hours=Decimal(overtime) if overtime is not None else None,
        )
        return self._id


class InMemoryLeaves:
    def __init__(self):
        self.items: dict[int, LeaveRequest] = {}
        self._id = 0

    def create_leave(self, *, worker_id, reason, from_date, to_date) -> int:
        self._id += 1
        self.items[self._id] = LeaveRequest(self._id, worker_id, reason, from_date, to_date, RequestStatus.PENDING)
        return self._id

    def get_leave(self, request_id: int):
        return self.items.get(int(request_id))

    def list_leave_requests(self):
        return sorted(self.items.values(), key=lambda r: r.request_id, reverse=True)

    def decide_leave(self, *, request_id, status) -> int:
        req = self.items.get(int(request_id))
        if not req or req.status != RequestStatus.PENDING:
            return 0
        self.items[int(request_id)] = LeaveRequest(
            req.request_id, req.worker_id, req.reason, req.from_date, req.to_date, status, req.created_at
        )
        return 1


class RecordingNotifier:
    def __init__(self, fail_for: tuple[str, ...] = ()):
        self.sent: list[dict] = []
        self.fail_for = set(fail_for)

    def send(self, *, to: str, subject: str, body: str) -> None:
        if to in self.fail_for:
            raise ConnectionError(f"SMTP refused {to}")
        self.sent.append({"to": to, "subject": subject, "body": body})


def make_worker(worker_id: str, shift_id: Optional[int], *, email=None, role=Role.WORKER, password="secret1"):
    return Worker(
        worker_id=worker_id,
        password_hash=generate_password_hash(password),
        role=role,
        job="Operator",
        email=email,
        shift_id=shift_id,
    )


@pytest.fixture
def clock():
    return FixedClock(datetime(2026, 2, 2, 9, 0, 0))


@pytest.fixture
def shifts_repo():
    return InMemoryShifts([DAY_SHIFT, NIGHT_SHIFT], {"W001": 1, "W002": 2, "W004": 1})


@pytest.fixture
def users_repo(shifts_repo):
    return InMemoryUsers(
        [
            make_worker("W001", 1, email="w001@example.com"),
            make_worker("W002", 2, email="w002@example.com"),
            make_worker("W003", None),
            make_worker("W004", 1),
            make_worker("admin", None, role=Role.ADMIN, password="admin123"),
        ],
        shifts_repo,
    )


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance(jobs={"W001": "Operator", "W002": "Packer"})


@pytest.fixture
def leaves_repo():
    return InMemoryLeaves()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def service(attendance_repo, shifts_repo, clock):
    return AttendanceService(attendance_repo, ShiftResolver(shifts_repo), clock=clock)
