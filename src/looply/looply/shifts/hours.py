"""Shift duration arithmetic.

All functions here are pure: they only read their arguments.
"""
from __future__ import annotations

import re
from typing import Iterable

from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import InvalidTimeFormat
from .model import WorkShift

_HHMM = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_hhmm(value: str) -> int:
    """Convert "HH:MM" into minutes since midnight."""
    match = _HHMM.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise InvalidTimeFormat(f"Invalid time {value!r} (expected HH:MM)")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidTimeFormat(f"Invalid time {value!r} (expected HH:MM)")
    return hours * 60 + minutes


def shift_minutes(shift: WorkShift) -> int:
    start = parse_hhmm(shift.start_time)
    end = parse_hhmm(shift.end_time)
    if end < start:
        end += MINUTES_PER_DAY

    worked = end - start - int(shift.break_minutes or 0)
    return max(worked, 0)


def compute_hours(shifts: Iterable[WorkShift]) -> float:
    """Total decimal hours over all shifts; 0.0 for no shifts."""
    return sum(shift_minutes(s) for s in shifts) / 60
