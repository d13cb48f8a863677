from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import optional_text, require_non_negative_int


@dataclass(frozen=True)
class WorkShift:
    """One continuous work interval inside a daily report.

    `end_time` earlier than `start_time` means the shift crosses midnight.
    Times are kept as the "HH:MM" strings the user entered; they are parsed
    (and rejected when malformed) by the hours calculator.
    """

    id: str
    start_time: str
    end_time: str
    break_minutes: int = 0
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WorkShift":
        return cls(
            id=str(data.get("id") or uuid.uuid4().hex),
            start_time=str(data.get("startTime", "")).strip(),
            end_time=str(data.get("endTime", "")).strip(),
            break_minutes=require_non_negative_int(data.get("breakMinutes") or 0, "breakMinutes"),
            description=optional_text(data.get("description")),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {
            "id": self.id,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "breakMinutes": self.break_minutes,
        }
        if self.description is not None:
            out["description"] = self.description
        return out

    def label(self) -> str:
        """Export form: "09:00-17:00 (30min break) - Regular day"."""
        text = f"{self.start_time}-{self.end_time}"
        if self.break_minutes:
            text += f" ({self.break_minutes}min break)"
        if self.description:
            text += f" - {self.description}"
        return text
