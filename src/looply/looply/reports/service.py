from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import as_iso_date, now_iso, today_iso
from ..common.validators import require_non_empty
from ..companies.service import CompanyService
from ..core.enums import ReportStatus
from ..core.exceptions import ReportAlreadySubmitted, ReportNotFound
from ..shifts.calculator.base import HoursCalculator
from ..shifts.calculator.standard_calculator import StandardHoursCalculator
from ..shifts.model import WorkShift
from .aggregator import compute_stats, sort_newest_first, to_csv
from .model import DashboardStats, EODReport, report_id_for
from .repository import ReportRepository

logger = logging.getLogger(__name__)


def _as_shifts(shifts: Iterable[WorkShift | Mapping[str, Any]]) -> tuple[WorkShift, ...]:
    return tuple(s if isinstance(s, WorkShift) else WorkShift.from_dict(s) for s in shifts)


class ReportService:
    """Use cases around end-of-day reports: save, submit, query, dashboard, export."""

    def __init__(
        self,
        reports: ReportRepository,
        companies: CompanyService,
        *,
        calculator: Optional[HoursCalculator] = None,
    ):
        self._reports = reports
        self._companies = companies
        self._calculator = calculator or StandardHoursCalculator()

    def save_draft(
        self,
        employee_id: str,
        company_id: str,
        work_date: date | str,
        summary: str,
        shifts: Iterable[WorkShift | Mapping[str, Any]],
    ) -> EODReport:
        employee_id = require_non_empty(employee_id, "Employee")
        day = as_iso_date(work_date)
        shift_list = _as_shifts(shifts)
        # Fails fast on malformed times before anything is stored.
        hours = self._calculator.total_hours(shift_list)

        report_id = report_id_for(employee_id, day)
        existing = self._reports.get(report_id)
        now = now_iso()

        if existing:
            if existing.is_submitted:
                raise ReportAlreadySubmitted(f"Report {report_id} was already submitted")
            report = replace(
                existing,
                summary=summary or "",
                shifts=shift_list,
                total_hours=hours,
                updated_at=now,
            )
        else:
            report = EODReport(
                id=report_id,
                employee_id=employee_id,
                company_id=require_non_empty(company_id, "Company"),
                work_date=day,
                summary=summary or "",
                shifts=shift_list,
                total_hours=hours,
                status=ReportStatus.DRAFT,
                created_at=now,
                updated_at=now,
            )

        self._reports.save(report)
        logger.info("Saved draft %s (%.2fh)", report_id, hours)
        return report

    def submit_report(self, employee_id: str, work_date: date | str) -> EODReport:
        employee_id = require_non_empty(employee_id, "Employee")
        report_id = report_id_for(employee_id, as_iso_date(work_date))
        draft = self._reports.get(report_id)
        if not draft:
            raise ReportNotFound(f"No draft saved for {report_id}")
        if draft.is_submitted:
            raise ReportAlreadySubmitted(f"Report {report_id} was already submitted")

        now = now_iso()
        report = replace(draft, status=ReportStatus.SUBMITTED, submitted_at=now, updated_at=now)
        self._reports.save(report)
        logger.info("Submitted report %s", report_id)
        return report

    def get_report(self, employee_id: str, work_date: date | str) -> Optional[EODReport]:
        employee_id = require_non_empty(employee_id, "Employee")
        return self._reports.get(report_id_for(employee_id, as_iso_date(work_date)))

    def get_reports(
        self,
        company_id: str,
        employee_id: Optional[str] = None,
        start_date: date | str | None = None,
        end_date: date | str | None = None,
    ) -> Sequence[EODReport]:
        start = as_iso_date(start_date) if start_date else None
        end = as_iso_date(end_date) if end_date else None

        reports = [r for r in self._reports.list_all() if r.company_id == company_id]
        if employee_id:
            reports = [r for r in reports if r.employee_id == employee_id]
        if start:
            reports = [r for r in reports if r.work_date >= start]
        if end:
            reports = [r for r in reports if r.work_date <= end]
        return sort_newest_first(reports)

    def get_dashboard_stats(self, company_id: str, as_of: date | str | None = None) -> DashboardStats:
        return compute_stats(
            self.get_reports(company_id),
            self._companies.count_active_employees(company_id),
            as_of or today_iso(),
            calculator=self._calculator,
        )

    def export_csv(
        self,
        company_id: str,
        start_date: date | str | None = None,
        end_date: date | str | None = None,
    ) -> str:
        reports = self.get_reports(company_id, start_date=start_date, end_date=end_date)
        names = {e.id: e.name for e in self._companies.get_employees(company_id)}
        return to_csv(reports, names.get, calculator=self._calculator)
