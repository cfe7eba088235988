from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta


@dataclass(frozen=True)
class Shift:
    """Domain entity: a work shift defined by wall-clock times of day.

    A shift whose end is not after its start (e.g. 22:00 -> 06:00) is an
    overnight shift and finishes on the next calendar day.
    """

    shift_id: int
    shift_name: str
    start_time: time
    end_time: time

    @property
    def is_overnight(self) -> bool:
        return self.end_time <= self.start_time

    def window_for(self, work_date: date) -> tuple[datetime, datetime]:
        """(start, end) of the shift that logically belongs to ``work_date``."""
        return shift_window(work_date, self.start_time, self.end_time)


def shift_window(work_date: date, start_time: time, end_time: time) -> tuple[datetime, datetime]:
    start = datetime.combine(work_date, start_time)
    end = datetime.combine(work_date, end_time)
    if end_time <= start_time:
        end += timedelta(days=1)
    return start, end
