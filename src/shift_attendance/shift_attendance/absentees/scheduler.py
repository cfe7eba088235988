from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Iterable, Optional

from ..common.datetime_utils import Clock, SystemClock
from .scanner import AbsenteeScanner, ScanReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReminderJob:
    shift_name: str
    hour: int
    minute: int

    def due_at(self, day: date) -> datetime:
        return datetime.combine(day, time(self.hour, self.minute))


def parse_schedule(value: str) -> list[ReminderJob]:
    """Parse "Shift 1@09:30,Shift 2@22:00" into jobs."""
    jobs = []
    for item in (value or "").split(","):
        item = item.strip()
        if not item:
            continue
        name, _, hhmm = item.rpartition("@")
        hour, minute = (int(p) for p in hhmm.split(":"))
        jobs.append(ReminderJob(shift_name=name.strip(), hour=hour, minute=minute))
    return jobs


class ReminderScheduler:
    """Daily absentee scans at fixed civil times, on a background thread.

    Each job fires at most once per calendar day. Jobs whose time has already
    passed when the scheduler starts wait for the next day.
    """

    def __init__(
        self,
        scanner: AbsenteeScanner,
        jobs: Iterable[ReminderJob],
        *,
        clock: Clock | None = None,
        poll_seconds: float = 30.0,
    ):
        self._scanner = scanner
        self._jobs = list(jobs)
        self._clock = clock or SystemClock()
        self._poll_seconds = poll_seconds
        self._last_run: dict[ReminderJob, date] = {}
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def prime(self, now: Optional[datetime] = None) -> None:
        now = now or self._clock.now()
        for job in self._jobs:
            if now >= job.due_at(now.date()):
                self._last_run[job] = now.date()

    def run_pending(self, now: Optional[datetime] = None) -> list[ScanReport]:
        now = now or self._clock.now()
        today = now.date()
        reports = []
        for job in self._jobs:
            if now < job.due_at(today) or self._last_run.get(job) == today:
                continue
            self._last_run[job] = today
            logger.info("Running %s reminder at %02d:%02d", job.shift_name, job.hour, job.minute)
            try:
                reports.append(self._scanner.run(job.shift_name, today))
            except Exception:
                logger.exception("Absentee scan for %s failed", job.shift_name)
        return reports

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self.prime()
        self._thread = threading.Thread(target=self._loop, name="reminder-scheduler", daemon=True)
        self._thread.start()
        logger.info("Reminder scheduler started (%d jobs)", len(self._jobs))

    def stop(self) -> None:
        self._stop.set()
        if self._thread:
            self._thread.join()
            self._thread = None
        logger.info("Reminder scheduler stopped")

    def _loop(self) -> None:
        while not self._stop.is_set():
            self.run_pending()
            self._stop.wait(self._poll_seconds)
