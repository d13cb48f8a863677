from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..core.enums import ReportStatus
from ..shifts.model import WorkShift


def report_id_for(employee_id: str, work_date: str) -> str:
    """Report identity: one report per (employee, date)."""
    return f"{employee_id}-{work_date}"


@dataclass(frozen=True)
class EODReport:
    """Domain entity: an employee's end-of-day report."""

    id: str
    employee_id: str
    company_id: str
    work_date: str
    summary: str
    shifts: tuple[WorkShift, ...]
    total_hours: Optional[float]
    status: ReportStatus
    created_at: str
    updated_at: str
    submitted_at: Optional[str] = None
    attachments: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_submitted(self) -> bool:
        return self.status == ReportStatus.SUBMITTED

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EODReport":
        total = data.get("totalHours")
        if total is None:
            # older records only carried hoursWorked
            total = data.get("hoursWorked")
        return cls(
            id=str(data.get("id") or report_id_for(data["employeeId"], data["date"])),
            employee_id=str(data["employeeId"]),
            company_id=str(data.get("companyId", "")),
            work_date=str(data["date"]),
            summary=str(data.get("summary") or ""),
            shifts=tuple(WorkShift.from_dict(s) for s in data.get("shifts") or []),
            total_hours=float(total) if total is not None else None,
            status=ReportStatus(data.get("status", ReportStatus.DRAFT.value)),
            created_at=str(data.get("createdAt", "")),
            updated_at=str(data.get("updatedAt", "")),
            submitted_at=data.get("submittedAt"),
            attachments=tuple(data.get("attachments") or ()),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {
            "id": self.id,
            "employeeId": self.employee_id,
            "companyId": self.company_id,
            "date": self.work_date,
            "summary": self.summary,
            "shifts": [s.to_dict() for s in self.shifts],
            "totalHours": self.total_hours,
            "status": self.status.value,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        if self.submitted_at:
            out["submittedAt"] = self.submitted_at
        if self.attachments:
            out["attachments"] = list(self.attachments)
        return out


@dataclass(frozen=True)
class DashboardStats:
    """Read-model for the employer dashboard. Derived, never persisted."""

    total_submissions: int
    pending_eods: int
    active_employees: int
    average_hours: float

    def to_dict(self) -> dict:
        return {
            "totalSubmissions": self.total_submissions,
            "pendingEODs": self.pending_eods,
            "activeEmployees": self.active_employees,
            "averageHours": self.average_hours,
        }
