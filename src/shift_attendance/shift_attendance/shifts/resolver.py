from __future__ import annotations

from ..core.exceptions import ShiftNotFoundError
from .model import Shift
from .repository import ShiftRepository


class ShiftResolver:
    """Look up the shift a worker is assigned to."""

    def __init__(self, shifts: ShiftRepository):
        self._shifts = shifts

    def resolve(self, worker_id: str) -> Shift:
        shift = self._shifts.get_for_worker(worker_id)
        if not shift:
            raise ShiftNotFoundError("Shift not found for this worker")
        return shift
