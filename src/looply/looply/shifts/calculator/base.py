from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ..model import WorkShift


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked hours)."""

    @abstractmethod
    def worked_minutes(self, shift: WorkShift) -> int:
        raise NotImplementedError

    def total_hours(self, shifts: Sequence[WorkShift]) -> float:
        return sum(self.worked_minutes(s) for s in shifts) / 60
