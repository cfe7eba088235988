from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from .base import StatusDecision
from .normal_strategy import NormalStrategy


class EarlyLeaveStrategy(NormalStrategy):
    """Check-out before shift end; overrides On time and Late alike."""

    def decide_checkout(self, *, now: datetime, shift_end: datetime, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.EARLY_LEAVE)
