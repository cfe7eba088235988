from __future__ import annotations

from .base import StatusDecision
from .normal_strategy import NormalStrategy
from ...core.enums import AttendanceStatus


class LateStrategy(NormalStrategy):
    """Late check-in. Check-out is decided like a normal one."""

    def decide_checkin(self, *, diff_minutes: float) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE)
