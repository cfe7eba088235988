from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_civil, format_date
from ..core.enums import RequestStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    worker_id: str
    reason: str
    from_date: date
    to_date: date
    status: RequestStatus
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.request_id,
            "worker_id": self.worker_id,
            "reason": self.reason,
            "from_date": format_date(self.from_date),
            "to_date": format_date(self.to_date),
            "status": self.status.value,
            "created_at": format_civil(self.created_at),
        }
