"""Pure aggregation over attendance rows.

Nothing here touches the database; callers pass in already filtered rows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ..attendance.model import AttendanceReportRow
from ..common.datetime_utils import format_date, to_money
from ..core.enums import AttendanceStatus

_WORKED = {AttendanceStatus.ON_TIME, AttendanceStatus.LATE}


@dataclass
class WorkerTotals:
    worker_id: str
    job: Optional[str] = None
    present_days: int = 0
    worked_days: int = 0
    late_days: int = 0
    early_leave_days: int = 0
    total_hours: Decimal = Decimal("0")
    total_overtime: Decimal = Decimal("0")
    work_dates: set[date] = field(default_factory=set)

    @property
    def distinct_days(self) -> int:
        return len(self.work_dates)

    def add(self, row: AttendanceReportRow) -> None:
        self.present_days += 1
        if row.status in _WORKED:
            self.worked_days += 1
        if row.status == AttendanceStatus.LATE:
            self.late_days += 1
        if row.status == AttendanceStatus.EARLY_LEAVE:
            self.early_leave_days += 1
        self.total_hours += Decimal(str(row.hours_worked or 0))
        self.total_overtime += Decimal(str(row.overtime_hours or 0))
        self.work_dates.add(row.work_date)


def summarize(rows: Iterable[AttendanceReportRow]) -> list[WorkerTotals]:
    """Group rows by worker, ordered by worker_id."""
    by_worker: dict[str, WorkerTotals] = {}
    for r in rows:
        totals = by_worker.get(r.worker_id)
        if not totals:
            totals = WorkerTotals(worker_id=r.worker_id, job=r.job)
            by_worker[r.worker_id] = totals
        totals.add(r)
    return [by_worker[k] for k in sorted(by_worker)]


@dataclass(frozen=True)
class DailySeries:
    labels: list[str]
    hours_per_day: list[Decimal]
    late_per_day: list[int]
    checkins_per_day: list[int]

    @property
    def total_hours(self) -> Decimal:
        return to_money(sum(self.hours_per_day, Decimal("0")))

    @property
    def total_late(self) -> int:
        return sum(self.late_per_day)

    @property
    def total_checkins(self) -> int:
        return sum(self.checkins_per_day)

    def to_dict(self) -> dict:
        return {
            "totalHours": float(self.total_hours),
            "totalLate": self.total_late,
            "totalCheckins": self.total_checkins,
            "labels": self.labels,
            "hoursPerDay": [float(h) for h in self.hours_per_day],
            "latePerDay": self.late_per_day,
            "checkinsPerDay": self.checkins_per_day,
        }


def daily_series(rows: Iterable[AttendanceReportRow]) -> DailySeries:
    """Hours, late count and check-in count per work date, oldest first."""
    hours: dict[date, Decimal] = {}
    late: dict[date, int] = {}
    checkins: dict[date, int] = {}
    for r in rows:
        d = r.work_date
        hours[d] = hours.get(d, Decimal("0")) + Decimal(str(r.hours_worked or 0))
        late[d] = late.get(d, 0) + (1 if r.status == AttendanceStatus.LATE else 0)
        checkins[d] = checkins.get(d, 0) + 1

    days = sorted(hours)
    return DailySeries(
        labels=[format_date(d) for d in days],
        hours_per_day=[to_money(hours[d]) for d in days],
        late_per_day=[late[d] for d in days],
        checkins_per_day=[checkins[d] for d in days],
    )
