from __future__ import annotations

from typing import Optional, Protocol

from .model import Shift


class ShiftRepository(Protocol):
    def get_for_worker(self, worker_id: str) -> Optional[Shift]:
        """Shift currently assigned to the worker, if any."""

        raise NotImplementedError
