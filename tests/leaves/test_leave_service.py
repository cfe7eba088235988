from __future__ import annotations

from datetime import date

import pytest

from src.shift_attendance.shift_attendance.core.enums import RequestStatus
from src.shift_attendance.shift_attendance.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.shift_attendance.shift_attendance.leaves.service import LeaveService

PAYLOAD = {"worker_id": "W001", "reason": "Family event", "from_date": "2026-02-10", "to_date": "2026-02-12"}


@pytest.fixture
def leave_service(leaves_repo, notifier):
    return LeaveService(leaves_repo, notifier, admin_email="admin@example.com")


def test_submit_creates_pending_request_and_mails_admin(leave_service, leaves_repo, notifier):
    request_id = leave_service.submit_leave(dict(PAYLOAD))

    req = leaves_repo.get_leave(request_id)
    assert req.status == RequestStatus.PENDING
    assert req.from_date == date(2026, 2, 10)
    assert notifier.sent[0]["to"] == "admin@example.com"
    assert "W001" in notifier.sent[0]["subject"]


@pytest.mark.parametrize("missing", ["worker_id", "reason", "from_date", "to_date"])
def test_submit_requires_every_field(leave_service, leaves_repo, missing):
    payload = dict(PAYLOAD)
    payload[missing] = "  "
    with pytest.raises(ValidationError):
        leave_service.submit_leave(payload)
    assert leaves_repo.items == {}


def test_submit_rejects_reversed_dates(leave_service):
    with pytest.raises(ValidationError):
        leave_service.submit_leave(dict(PAYLOAD, from_date="2026-02-12", to_date="2026-02-10"))


def test_mail_failure_does_not_fail_submission(leave_service, leaves_repo, notifier):
    notifier.fail_for.add("admin@example.com")

    request_id = leave_service.submit_leave(dict(PAYLOAD))

    assert leaves_repo.get_leave(request_id).status == RequestStatus.PENDING


def test_only_admin_lists_requests(leave_service):
    leave_service.submit_leave(dict(PAYLOAD))
    leave_service.submit_leave(dict(PAYLOAD, worker_id="W002"))

    with pytest.raises(AuthorizationError):
        leave_service.list_requests(current_role="worker")
    assert [r.worker_id for r in leave_service.list_requests(current_role="admin")] == ["W002", "W001"]


def test_decide_approves_pending(leave_service, leaves_repo):
    request_id = leave_service.submit_leave(dict(PAYLOAD))

    assert leave_service.decide(current_role="admin", request_id=request_id, status="Approved") == RequestStatus.APPROVED
    assert leaves_repo.get_leave(request_id).status == RequestStatus.APPROVED


def test_decide_guards(leave_service):
    request_id = leave_service.submit_leave(dict(PAYLOAD))

    with pytest.raises(AuthorizationError):
        leave_service.decide(current_role="worker", request_id=request_id, status="Approved")
    with pytest.raises(ValidationError):
        leave_service.decide(current_role="admin", request_id=request_id, status="Pending")
    with pytest.raises(NotFoundError):
        leave_service.decide(current_role="admin", request_id=999, status="Rejected")


def test_decided_request_cannot_be_redecided(leave_service):
    request_id = leave_service.submit_leave(dict(PAYLOAD))
    leave_service.decide(current_role="admin", request_id=request_id, status="Rejected")

    with pytest.raises(ValidationError):
        leave_service.decide(current_role="admin", request_id=request_id, status="Approved")
