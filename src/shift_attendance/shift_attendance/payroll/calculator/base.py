from __future__ import annotations

from abc import ABC, abstractmethod

from ..aggregator import WorkerTotals


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(self, totals: WorkerTotals) -> dict:
        raise NotImplementedError
