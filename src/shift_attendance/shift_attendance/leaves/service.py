from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_fields
from ..core.enums import RequestStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..notifications.notifier import Notifier, notify_quietly
from .model import LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    def __init__(self, leaves: LeaveRepository, notifier: Notifier, *, admin_email: Optional[str] = None):
        self._leaves = leaves
        self._notifier = notifier
        self._admin_email = admin_email

    @staticmethod
    def _parse_date(value: str, field_name: str) -> date:
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"{field_name} must be YYYY-MM-DD")

    def submit_leave(self, payload: dict) -> int:
        fields = require_fields(payload, "worker_id", "reason", "from_date", "to_date")
        from_date = self._parse_date(fields["from_date"], "from_date")
        to_date = self._parse_date(fields["to_date"], "to_date")
        if to_date < from_date:
            raise ValidationError("to_date must be on or after from_date")

        request_id = self._leaves.create_leave(
            worker_id=fields["worker_id"],
            reason=fields["reason"],
            from_date=from_date,
            to_date=to_date,
        )
        logger.info("Leave request %s submitted by %s", request_id, fields["worker_id"])

        if self._admin_email:
            notify_quietly(
                self._notifier,
                to=self._admin_email,
                subject=f"Leave Request from {fields['worker_id']}",
                body=(
                    f"Worker {fields['worker_id']} requested leave from {from_date} to {to_date}.\n"
                    f"Reason: {fields['reason']}"
                ),
            )
        else:
            logger.warning("ADMIN_EMAIL not set, leave request %s not mailed", request_id)
        return request_id

    def list_requests(self, *, current_role: Optional[str]) -> Sequence[LeaveRequest]:
        if current_role != Role.ADMIN.value:
            raise AuthorizationError("Only admin can view requests")
        return self._leaves.list_leave_requests()

    def decide(self, *, current_role: Optional[str], request_id: int, status: Optional[str]) -> RequestStatus:
        if current_role != Role.ADMIN.value:
            raise AuthorizationError("Only admin can update requests")

        if status not in (RequestStatus.APPROVED.value, RequestStatus.REJECTED.value):
            raise ValidationError("Invalid status")
        new_status = RequestStatus(status)

        req = self._leaves.get_leave(int(request_id))
        if not req:
            raise NotFoundError("Request not found")
        if req.status != RequestStatus.PENDING:
            raise ValidationError(f"Request already {req.status.value}")

        if self._leaves.decide_leave(request_id=int(request_id), status=new_status) == 0:
            # decided by someone else between read and write
            raise ValidationError("Request was already decided")
        logger.info("Leave request %s %s", request_id, new_status.value)
        return new_status
