from __future__ import annotations

from datetime import date, datetime

import pytest

from src.shift_attendance.shift_attendance.core.enums import AttendanceStatus
from src.shift_attendance.shift_attendance.core.exceptions import (
    AlreadyCheckedInError,
    AuthorizationError,
    ShiftNotFoundError,
    TooEarlyError,
    TooLateError,
)


def test_checkin_requires_worker_role(service, attendance_repo):
    with pytest.raises(AuthorizationError):
        service.check_in("W001", "admin")
    assert attendance_repo.records == {}


def test_checkin_without_shift_fails(service):
    with pytest.raises(ShiftNotFoundError):
        service.check_in("W003", "worker")


def test_checkin_unknown_worker_fails(service):
    with pytest.raises(ShiftNotFoundError):
        service.check_in("NOPE", "worker")


def test_day_shift_checkin_on_time(service, attendance_repo, clock):
    clock.value = datetime(2026, 2, 2, 8, 55)

    result = service.check_in("W001", "worker")

    assert result.status == AttendanceStatus.ON_TIME
    assert result.work_date == date(2026, 2, 2)
    assert result.shift_name == "Shift 1"
    assert result.to_dict()["checkin_time"] == "2026-02-02 08:55:00"
    rec = attendance_repo.find_open_session("W001")
    assert rec.shift_id == 1
    assert rec.checkin_time == clock.value


@pytest.mark.parametrize(
    "hh, mm, expected",
    [
        (9, 15, AttendanceStatus.ON_TIME),
        (9, 16, AttendanceStatus.LATE),
        (8, 0, AttendanceStatus.ON_TIME),
        (14, 0, AttendanceStatus.LATE),
    ],
)
def test_late_threshold_is_strictly_after_15_minutes(service, clock, hh, mm, expected):
    clock.value = datetime(2026, 2, 2, hh, mm)
    assert service.check_in("W001", "worker").status == expected


def test_one_second_over_15_minutes_is_late(service, clock):
    clock.value = datetime(2026, 2, 2, 9, 15, 1)
    assert service.check_in("W001", "worker").status == AttendanceStatus.LATE


def test_too_early_boundary(service, clock, attendance_repo):
    clock.value = datetime(2026, 2, 2, 7, 59)
    with pytest.raises(TooEarlyError) as exc:
        service.check_in("W001", "worker")
    assert "Shift 1" in str(exc.value)
    assert "09:00" in str(exc.value)
    assert attendance_repo.records == {}


def test_too_late_boundary(service, clock):
    clock.value = datetime(2026, 2, 2, 14, 1)
    with pytest.raises(TooLateError) as exc:
        service.check_in("W001", "worker")
    assert "Shift 1" in str(exc.value)


def test_failed_checkin_is_repeatable_and_writes_nothing(service, clock, attendance_repo):
    clock.value = datetime(2026, 2, 2, 6, 0)
    for _ in range(3):
        with pytest.raises(TooEarlyError):
            service.check_in("W001", "worker")
    assert attendance_repo.insert_calls == 0
    assert attendance_repo.records == {}


def test_second_checkin_same_day_is_rejected(service, clock, attendance_repo):
    clock.value = datetime(2026, 2, 2, 9, 0)
    service.check_in("W001", "worker")
    clock.value = datetime(2026, 2, 2, 17, 0)
    service.check_out("W001", "worker")

    clock.value = datetime(2026, 2, 2, 10, 0)
    with pytest.raises(AlreadyCheckedInError):
        service.check_in("W001", "worker")
    assert len(attendance_repo.records) == 1


def test_open_session_blocks_checkin_on_next_day(service, clock):
    clock.value = datetime(2026, 2, 2, 9, 0)
    service.check_in("W001", "worker")

    clock.value = datetime(2026, 2, 3, 9, 0)
    with pytest.raises(AlreadyCheckedInError):
        service.check_in("W001", "worker")


def test_overnight_checkin_before_midnight_attributes_today(service, clock):
    clock.value = datetime(2026, 2, 2, 23, 50)

    result = service.check_in("W002", "worker")

    assert result.work_date == date(2026, 2, 2)
    assert result.status == AttendanceStatus.LATE


def test_overnight_checkin_after_midnight_attributes_previous_day(service, clock):
    clock.value = datetime(2026, 2, 3, 0, 30)

    result = service.check_in("W002", "worker")

    assert result.work_date == date(2026, 2, 2)
    assert result.status == AttendanceStatus.LATE


def test_overnight_checkin_early_evening(service, clock):
    clock.value = datetime(2026, 2, 2, 21, 0)

    result = service.check_in("W002", "worker")

    assert result.work_date == date(2026, 2, 2)
    assert result.status == AttendanceStatus.ON_TIME


def test_overnight_checkin_mid_morning_is_too_early(service, clock):
    clock.value = datetime(2026, 2, 3, 8, 0)
    with pytest.raises(TooEarlyError):
        service.check_in("W002", "worker")


def test_overnight_checkin_past_cutoff_before_shift_end_is_too_late(service, clock, attendance_repo):
    clock.value = datetime(2026, 2, 3, 3, 1)

    with pytest.raises(TooLateError) as exc:
        service.check_in("W002", "worker")

    assert "Shift 2" in str(exc.value)
    assert attendance_repo.records == {}


def test_concurrent_checkin_loses_on_unique_key(service, attendance_repo, monkeypatch):
    # Another request inserted the row after both lookups came back empty.
    attendance_repo.add_closed("W001", date(2026, 2, 2), AttendanceStatus.ON_TIME)
    monkeypatch.setattr(attendance_repo, "find_open_session", lambda worker_id: None)
    monkeypatch.setattr(attendance_repo, "find_by_worker_and_date", lambda worker_id, work_date: None)

    with pytest.raises(AlreadyCheckedInError):
        service.check_in("W001", "worker")

    assert attendance_repo.insert_calls == 1
    assert len(attendance_repo.records) == 1
