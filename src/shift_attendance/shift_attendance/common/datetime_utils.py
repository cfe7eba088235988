from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_TIMEZONE

CIVIL_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"

TWO_PLACES = Decimal("0.01")


class Clock(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock:
    """Wall clock in the operating civil timezone.

    Returns naive datetimes: timestamps are stored and transmitted as civil
    (local) time, never as UTC instants.
    """

    def __init__(self, tz_name: str = DEFAULT_TIMEZONE):
        self._tz = ZoneInfo(tz_name)

    def now(self) -> datetime:
        return datetime.now(self._tz).replace(tzinfo=None, microsecond=0)


@dataclass
class FixedClock:
    """Clock pinned to a given instant (tests, replays)."""

    value: datetime

    def now(self) -> datetime:
        return self.value


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_civil(value: datetime | None) -> str | None:
    return value.strftime(CIVIL_FORMAT) if value else None


def format_date(value: date | None) -> str | None:
    return value.strftime(DATE_FORMAT) if value else None


def minutes_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 60


def hours_between(start: datetime, end: datetime) -> Decimal:
    """Elapsed hours rounded half-up to 2 decimals."""
    seconds = Decimal(int((end - start).total_seconds()))
    return to_money(seconds / Decimal(3600))


def to_money(value) -> Decimal:
    """Quantize to 2 decimals (hours and amounts alike)."""
    if value is None:
        value = 0
    return Decimal(str(value)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
