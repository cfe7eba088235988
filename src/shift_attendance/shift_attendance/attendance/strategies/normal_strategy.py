from __future__ import annotations

from datetime import datetime

from ...common.datetime_utils import hours_between
from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """On-time check-in; check-out at or after shift end (overtime past it)."""

    def decide_checkin(self, *, diff_minutes: float) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ON_TIME)

    def decide_checkout(self, *, now: datetime, shift_end: datetime, current: AttendanceStatus) -> StatusDecision:
        if now > shift_end:
            return StatusDecision(status=current, overtime_hours=hours_between(shift_end, now))
        return StatusDecision(status=current)
