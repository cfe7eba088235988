from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for permission checks."""

    ADMIN = "admin"
    WORKER = "worker"


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the database."""

    ON_TIME = "On time"
    LATE = "Late"
    EARLY_LEAVE = "Left early"


class RequestStatus(str, Enum):
    """Leave request approval states."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
