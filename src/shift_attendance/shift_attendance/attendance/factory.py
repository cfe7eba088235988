from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.constants import LATE_GRACE_MINUTES
from .strategies.base import AttendanceStrategy
from .strategies.early_strategy import EarlyLeaveStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    grace_minutes: int = LATE_GRACE_MINUTES

    def for_checkin(self, *, diff_minutes: float) -> AttendanceStrategy:
        # Late strictly after the grace period; exactly on it is still on time.
        if diff_minutes > self.grace_minutes:
            return LateStrategy()
        return NormalStrategy()

    def for_checkout(self, *, now: datetime, shift_end: datetime) -> AttendanceStrategy:
        if now < shift_end:
            return EarlyLeaveStrategy()
        return NormalStrategy()
