from __future__ import annotations

from decimal import Decimal

from ...common.datetime_utils import to_money
from ...core.constants import DAILY_WAGE, OVERTIME_RATE
from ..aggregator import WorkerTotals
from .base import PayrollCalculator


class SalarySummaryCalculator(PayrollCalculator):
    """Daily-wage rule: worked_days x daily wage + overtime hours x overtime rate."""

    def __init__(self, *, daily_wage=DAILY_WAGE, overtime_rate=OVERTIME_RATE):
        self._daily_wage = Decimal(str(daily_wage))
        self._overtime_rate = Decimal(str(overtime_rate))

    def compute(self, totals: WorkerTotals) -> dict:
        base_salary = to_money(totals.worked_days * self._daily_wage)
        overtime_amount = to_money(totals.total_overtime * self._overtime_rate)
        return {
            "worker_id": totals.worker_id,
            "job": totals.job,
            "present_days": totals.present_days,
            "worked_days": totals.worked_days,
            "late_days": totals.late_days,
            "early_leave_days": totals.early_leave_days,
            "total_hours": to_money(totals.total_hours),
            "total_overtime": to_money(totals.total_overtime),
            "base_salary": base_salary,
            "overtime_amount": overtime_amount,
            "total_salary": to_money(base_salary + overtime_amount),
        }
