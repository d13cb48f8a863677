from __future__ import annotations

from .base import HoursCalculator
from ..hours import shift_minutes
from ..model import WorkShift


class StandardHoursCalculator(HoursCalculator):
    """Standard rule: (end - start, wrapping past midnight) - break_minutes, not below 0."""

    def worked_minutes(self, shift: WorkShift) -> int:
        return shift_minutes(shift)
