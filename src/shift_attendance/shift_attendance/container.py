from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .absentees.scanner import AbsenteeScanner
from .absentees.scheduler import ReminderJob, ReminderScheduler
from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import Clock, SystemClock
from .core.constants import DEFAULT_TIMEZONE
from .database.connection import DBConfig, DatabaseConnection
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .notifications.notifier import Notifier, SmtpNotifier, SmtpSettings
from .payroll.service import PayrollReportService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .shifts.resolver import ShiftResolver
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    clock: Clock
    notifier: Notifier

    users_repo: UserRepository
    shifts_repo: ShiftRepository
    attendance_repo: AttendanceRepository
    leaves_repo: LeaveRepository

    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService
    leave_service: LeaveService
    payroll_report_service: PayrollReportService
    absentee_scanner: AbsenteeScanner
    reminder_scheduler: ReminderScheduler


def assemble(
    *,
    users_repo: UserRepository,
    shifts_repo: ShiftRepository,
    attendance_repo: AttendanceRepository,
    leaves_repo: LeaveRepository,
    clock: Clock,
    notifier: Notifier,
    admin_email: Optional[str] = None,
    reminder_jobs: Iterable[ReminderJob] = (),
) -> Container:
    """Wire services on top of the given repositories and ports."""

    attendance_service = AttendanceService(
        attendance_repo,
        ShiftResolver(shifts_repo),
        clock=clock,
        strategy_factory=AttendanceStrategyFactory(),
    )
    absentee_scanner = AbsenteeScanner(users_repo, attendance_repo, notifier, clock=clock)

    return Container(
        clock=clock,
        notifier=notifier,
        users_repo=users_repo,
        shifts_repo=shifts_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        attendance_service=attendance_service,
        leave_service=LeaveService(leaves_repo, notifier, admin_email=admin_email or None),
        payroll_report_service=PayrollReportService(attendance_repo, clock=clock),
        absentee_scanner=absentee_scanner,
        reminder_scheduler=ReminderScheduler(absentee_scanner, reminder_jobs, clock=clock),
    )


def build_container(
    *,
    db_config: dict,
    timezone: str = DEFAULT_TIMEZONE,
    smtp: Optional[dict] = None,
    admin_email: Optional[str] = None,
    reminder_jobs: Iterable[ReminderJob] = (),
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble(
        users_repo=MySQLUserRepository(conn),
        shifts_repo=MySQLShiftRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        leaves_repo=MySQLLeaveRepository(conn),
        clock=SystemClock(timezone),
        notifier=SmtpNotifier(SmtpSettings.from_dict(smtp or {})),
        admin_email=admin_email,
        reminder_jobs=reminder_jobs,
    )
