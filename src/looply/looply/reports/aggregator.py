"""Dashboard statistics and CSV export over a collection of reports.

Everything here is a pure function of its arguments: inputs are never
mutated, and the same input always yields the same output.
"""
from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import as_iso_date
from ..core.constants import CSV_HEADER, UNKNOWN_EMPLOYEE
from ..core.enums import ReportStatus
from ..shifts.calculator.base import HoursCalculator
from ..shifts.calculator.standard_calculator import StandardHoursCalculator
from .model import DashboardStats, EODReport

EmployeeLookup = Callable[[str], Optional[str]]

_DEFAULT_CALCULATOR = StandardHoursCalculator()


def resolve_hours(report: EODReport, calculator: Optional[HoursCalculator] = None) -> float:
    """Hours worked for a report.

    Shifts win when present; the stored total is only used for reports
    without shifts, and a missing or negative total counts as 0.
    """
    if report.shifts:
        return (calculator or _DEFAULT_CALCULATOR).total_hours(report.shifts)
    if report.total_hours is not None and report.total_hours >= 0:
        return float(report.total_hours)
    return 0.0


def compute_stats(
    reports: Iterable[EODReport],
    active_employee_count: int,
    as_of: date | str,
    *,
    calculator: Optional[HoursCalculator] = None,
) -> DashboardStats:
    day = as_iso_date(as_of)
    submitted = [r for r in reports if r.work_date == day and r.status == ReportStatus.SUBMITTED]

    total = len(submitted)
    hours = sum(resolve_hours(r, calculator) for r in submitted)

    return DashboardStats(
        total_submissions=total,
        pending_eods=max(0, int(active_employee_count) - total),
        active_employees=int(active_employee_count),
        average_hours=hours / total if total else 0.0,
    )


def quote_field(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def _employee_name(lookup: EmployeeLookup, employee_id: str) -> str:
    try:
        name = lookup(employee_id)
    except LookupError:
        name = None
    return name or UNKNOWN_EMPLOYEE


def sort_newest_first(reports: Iterable[EODReport]) -> list[EODReport]:
    # sorted() is stable with reverse=True, so same-day reports keep their order.
    return sorted(reports, key=lambda r: r.work_date, reverse=True)


def to_csv_rows(
    reports: Sequence[EODReport],
    employee_lookup: EmployeeLookup,
    *,
    calculator: Optional[HoursCalculator] = None,
) -> list[str]:
    rows = []
    for r in sort_newest_first(reports):
        shifts_text = "; ".join(s.label() for s in r.shifts)
        rows.append(
            ",".join(
                [
                    r.work_date,
                    quote_field(_employee_name(employee_lookup, r.employee_id)),
                    f"{resolve_hours(r, calculator):.2f}",
                    quote_field(shifts_text),
                    quote_field(r.summary),
                    r.status.value,
                ]
            )
        )
    return rows


def to_csv(
    reports: Sequence[EODReport],
    employee_lookup: EmployeeLookup,
    *,
    calculator: Optional[HoursCalculator] = None,
) -> str:
    lines = [CSV_HEADER, *to_csv_rows(reports, employee_lookup, calculator=calculator)]
    return "\n".join(lines) + "\n"
