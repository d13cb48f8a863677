from __future__ import annotations

from src.looply.looply.core.enums import ReportStatus
from src.looply.looply.reports.model import EODReport, report_id_for
from src.looply.looply.shifts.hours import compute_hours
from src.looply.looply.shifts.model import WorkShift


def make_shift(start: str, end: str, break_minutes: int = 0, description=None, id="s1") -> WorkShift:
    return WorkShift(id=id, start_time=start, end_time=end, break_minutes=break_minutes, description=description)


def make_report(
    employee_id: str = "e1",
    work_date: str = "2026-02-01",
    *,
    shifts=(),
    total_hours=None,
    status: ReportStatus = ReportStatus.SUBMITTED,
    summary: str = "Did things",
    company_id: str = "c1",
) -> EODReport:
    shifts = tuple(shifts)
    if total_hours is None and shifts:
        total_hours = compute_hours(shifts)
    return EODReport(
        id=report_id_for(employee_id, work_date),
        employee_id=employee_id,
        company_id=company_id,
        work_date=work_date,
        summary=summary,
        shifts=shifts,
        total_hours=total_hours,
        status=status,
        created_at="2026-02-01T18:00:00+00:00",
        updated_at="2026-02-01T18:00:00+00:00",
    )
