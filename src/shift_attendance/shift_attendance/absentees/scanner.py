from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import Clock, SystemClock, format_date
from ..notifications.notifier import Notifier
from ..users.model import Worker
from ..users.repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanReport:
    shift_name: str
    work_date: date
    notified: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def absentees(self) -> list[str]:
        return sorted(self.notified + self.failed + self.skipped)

    def to_dict(self) -> dict:
        return {
            "shift_name": self.shift_name,
            "work_date": format_date(self.work_date),
            "absentees": self.absentees,
            "notified": self.notified,
            "failed": self.failed,
            "skipped": self.skipped,
        }


class AbsenteeScanner:
    """Find workers of a shift with no attendance for a date and remind them."""

    def __init__(
        self,
        users: UserRepository,
        attendance: AttendanceRepository,
        notifier: Notifier,
        *,
        clock: Clock | None = None,
    ):
        self._users = users
        self._attendance = attendance
        self._notifier = notifier
        self._clock = clock or SystemClock()

    def find_absentees(self, shift_name: str, work_date: date) -> list[Worker]:
        assigned = self._users.list_workers_on_shift(shift_name)
        present = self._attendance.list_worker_ids_with_record(work_date)
        return [w for w in assigned if w.worker_id not in present]

    def run(self, shift_name: str, work_date: Optional[date] = None) -> ScanReport:
        work_date = work_date or self._clock.now().date()
        report = ScanReport(shift_name=shift_name, work_date=work_date)

        absentees = self.find_absentees(shift_name, work_date)
        if not absentees:
            logger.info("All %s workers checked in on %s", shift_name, work_date)
            return report

        for worker in absentees:
            if not worker.email:
                report.skipped.append(worker.worker_id)
                continue
            try:
                self._notifier.send(
                    to=worker.email,
                    subject=f"Reminder: Please Check-In ({shift_name})",
                    body=(
                        f"Hello {worker.worker_id}, you haven't checked in yet for {shift_name} "
                        f"today ({format_date(work_date)}). Please check in."
                    ),
                )
            except Exception as e:
                logger.error("Reminder to %s (%s) failed: %s", worker.worker_id, shift_name, e)
                report.failed.append(worker.worker_id)
                continue
            logger.info("Reminder sent to %s (%s)", worker.worker_id, shift_name)
            report.notified.append(worker.worker_id)

        return report
