from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def create_leave(self, *, worker_id: str, reason: str, from_date: date, to_date: date) -> int:
        """Insert a Pending request."""

        raise NotImplementedError

    def get_leave(self, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_leave_requests(self) -> Sequence[LeaveRequest]:
        """Newest first."""

        raise NotImplementedError

    def decide_leave(self, *, request_id: int, status: RequestStatus) -> int:
        """Move a Pending request to ``status``; returns the affected row count."""

        raise NotImplementedError
