from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import Clock, SystemClock, hours_between, minutes_between
from ..core.constants import EARLY_CHECKIN_MINUTES, LATE_CHECKIN_CUTOFF_MINUTES
from ..core.enums import Role
from ..core.exceptions import (
    AlreadyCheckedInError,
    AuthorizationError,
    NoActiveSessionError,
    NotFoundError,
    TooEarlyError,
    TooLateError,
    ValidationError,
)
from ..shifts.model import Shift, shift_window
from ..shifts.resolver import ShiftResolver
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, AttendanceReportRow, CheckInResult, CheckOutResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Check-in / check-out state machine.

    A worker is either without an active session or has exactly one open
    record; check-in opens it and check-out closes it. "Now" is read from
    the clock once per call and used for every guard and persisted value.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        resolver: ShiftResolver,
        *,
        clock: Clock | None = None,
        strategy_factory: AttendanceStrategyFactory | None = None,
        early_minutes: int = EARLY_CHECKIN_MINUTES,
        late_cutoff_minutes: int = LATE_CHECKIN_CUTOFF_MINUTES,
    ):
        self._attendance = attendance
        self._resolver = resolver
        self._clock = clock or SystemClock()
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._early_minutes = int(early_minutes)
        self._late_cutoff_minutes = int(late_cutoff_minutes)

    def _admissible(self, diff_minutes: float) -> bool:
        return -self._early_minutes <= diff_minutes <= self._late_cutoff_minutes

    def _select_window(self, shift: Shift, now: datetime) -> tuple[datetime, datetime]:
        start, end = shift.window_for(now.date())
        if shift.is_overnight and not self._admissible(minutes_between(start, now)):
            # Until yesterday's overnight shift ends, check-ins are judged against it.
            prev_start, prev_end = shift.window_for(now.date() - timedelta(days=1))
            if self._admissible(minutes_between(prev_start, now)) or now < prev_end:
                return prev_start, prev_end
        return start, end

    def check_in(self, worker_id: str, role: Optional[str]) -> CheckInResult:
        if role != Role.WORKER.value:
            raise AuthorizationError("Only workers can check in")

        shift = self._resolver.resolve(worker_id)
        now = self._clock.now()

        shift_start, _ = self._select_window(shift, now)
        work_date = shift_start.date()

        if self._attendance.find_open_session(worker_id):
            raise AlreadyCheckedInError("Already checked in: check out of the open shift first")
        if self._attendance.find_by_worker_and_date(worker_id, work_date):
            raise AlreadyCheckedInError("Already checked in today")

        diff_minutes = minutes_between(shift_start, now)
        start_label = shift.start_time.strftime("%H:%M:%S")
        if diff_minutes < -self._early_minutes:
            raise TooEarlyError(f"Too early for check-in: {shift.shift_name} starts at {start_label}")
        if diff_minutes > self._late_cutoff_minutes:
            raise TooLateError(
                f"Check-in denied. You are more than {self._late_cutoff_minutes // 60} hours late "
                f"for the {shift.shift_name} shift (starts at {start_label}). Please contact your supervisor."
            )

        decision = self._factory.for_checkin(diff_minutes=diff_minutes).decide_checkin(diff_minutes=diff_minutes)

        self._attendance.insert(
            worker_id=worker_id,
            work_date=work_date,
            checkin_time=now,
            shift_id=shift.shift_id,
            shift_start_time=shift.start_time,
            shift_end_time=shift.end_time,
            status=decision.status,
        )
        logger.info("Check-in %s work_date=%s shift=%s status=%s", worker_id, work_date, shift.shift_name, decision.status.value)

        return CheckInResult(
            worker_id=worker_id,
            shift_name=shift.shift_name,
            status=decision.status,
            work_date=work_date,
            checkin_time=now,
        )

    def check_out(self, worker_id: str, role: Optional[str]) -> CheckOutResult:
        if role != Role.WORKER.value:
            raise AuthorizationError("Only workers can check out")

        now = self._clock.now()

        record = self._attendance.find_open_session(worker_id)
        if not record:
            raise NoActiveSessionError("No active check-in found")
        if now < record.checkin_time:
            raise ValidationError("Check-out time cannot be earlier than check-in time")

        _, shift_end = shift_window(record.work_date, record.shift_start_time, record.shift_end_time)
        hours_worked = hours_between(record.checkin_time, now)

        strategy = self._factory.for_checkout(now=now, shift_end=shift_end)
        decision = strategy.decide_checkout(now=now, shift_end=shift_end, current=record.status)

        affected = self._attendance.update_checkout(
            attendance_id=record.attendance_id,
            checkout_time=now,
            hours_worked=hours_worked,
            overtime_hours=decision.overtime_hours,
            status=decision.status,
        )
        if affected == 0:
            raise NotFoundError("Attendance record was already closed")
        logger.info(
            "Check-out %s work_date=%s hours=%s overtime=%s status=%s",
            worker_id, record.work_date, hours_worked, decision.overtime_hours, decision.status.value,
        )

        return CheckOutResult(
            worker_id=worker_id,
            checkin_time=record.checkin_time,
            checkout_time=now,
            hours_worked=hours_worked,
            overtime_hours=decision.overtime_hours,
            status=decision.status,
        )

    def history(self, worker_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_worker(worker_id)

    def report(self, *, worker_id: Optional[str] = None, role: Optional[str] = None) -> Sequence[AttendanceReportRow]:
        """All records, or only the caller's own rows when a worker asks."""
        if role == Role.WORKER.value and worker_id:
            return self._attendance.get_report_rows(worker_id=worker_id)
        return self._attendance.get_report_rows()
