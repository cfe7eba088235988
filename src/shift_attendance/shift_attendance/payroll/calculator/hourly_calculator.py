from __future__ import annotations

from decimal import Decimal

from ...common.datetime_utils import to_money
from ...core.constants import HOURLY_RATE, OVERTIME_HOURLY_RATE
from ..aggregator import WorkerTotals
from .base import PayrollCalculator


class HourlyPayrollCalculator(PayrollCalculator):
    """Hourly rule: total hours x hourly rate + overtime hours x overtime hourly rate."""

    def __init__(self, *, hourly_rate=HOURLY_RATE, overtime_hourly_rate=OVERTIME_HOURLY_RATE):
        self._hourly_rate = Decimal(str(hourly_rate))
        self._overtime_hourly_rate = Decimal(str(overtime_hourly_rate))

    def compute(self, totals: WorkerTotals) -> dict:
        total_hours = to_money(totals.total_hours)
        total_overtime = to_money(totals.total_overtime)
        return {
            "worker_id": totals.worker_id,
            "job": totals.job,
            "worked_days": totals.distinct_days,
            "total_hours": total_hours,
            "total_overtime": total_overtime,
            "salary": to_money(total_hours * self._hourly_rate + total_overtime * self._overtime_hourly_rate),
        }
