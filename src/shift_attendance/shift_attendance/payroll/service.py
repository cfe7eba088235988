from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import Clock, SystemClock
from ..core.exceptions import ValidationError
from .aggregator import DailySeries, daily_series, summarize
from .calculator.base import PayrollCalculator
from .calculator.hourly_calculator import HourlyPayrollCalculator
from .calculator.salary_summary_calculator import SalarySummaryCalculator


@dataclass(frozen=True)
class MonthlyPayroll:
    month: int
    year: int
    rows: list[dict]


def parse_period(month, year) -> tuple[Optional[int], Optional[int]]:
    """Month/year query values; the filter applies only when both are given."""
    if not month or not year:
        return None, None
    try:
        m, y = int(month), int(year)
    except (TypeError, ValueError):
        raise ValidationError("month and year must be numbers")
    if not 1 <= m <= 12:
        raise ValidationError("month must be between 1 and 12")
    return m, y


class PayrollReportService:
    """Salary summary, monthly payroll and analytics views.

    The salary summary and the monthly payroll use different calculators and
    rate schedules on purpose; their totals are not expected to agree.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        clock: Clock | None = None,
        summary_calculator: Optional[PayrollCalculator] = None,
        payroll_calculator: Optional[PayrollCalculator] = None,
    ):
        self._attendance = attendance
        self._clock = clock or SystemClock()
        self._summary_calculator = summary_calculator or SalarySummaryCalculator()
        self._payroll_calculator = payroll_calculator or HourlyPayrollCalculator()

    def salary_summary(self, *, worker_id: Optional[str] = None, month=None, year=None) -> list[dict]:
        m, y = parse_period(month, year)
        rows = self._attendance.get_report_rows(worker_id=worker_id or None, month=m, year=y)
        out = []
        for totals in summarize(rows):
            line = self._summary_calculator.compute(totals)
            line["month"] = m
            line["year"] = y
            out.append(line)
        return out

    def monthly_payroll(self, *, worker_id: Optional[str] = None) -> MonthlyPayroll:
        today = self._clock.now().date()
        rows = self._attendance.get_report_rows(worker_id=worker_id or None, month=today.month, year=today.year)
        return MonthlyPayroll(
            month=today.month,
            year=today.year,
            rows=[self._payroll_calculator.compute(t) for t in summarize(rows)],
        )

    def analytics(self) -> DailySeries:
        return daily_series(self._attendance.get_report_rows())
