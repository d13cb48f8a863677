"""Demo company used for local development ("test mode").

Everything is deterministic for a given `today`, so the seed can be re-run
safely: previous demo records are removed before new ones are written.
"""
from __future__ import annotations

import logging
from datetime import date, timedelta

from werkzeug.security import generate_password_hash

from ..common.datetime_utils import now_iso
from ..companies.model import Company, Employee
from ..companies.repository import KeyValueCompanyRepository, KeyValueEmployeeRepository
from ..core.constants import EMPLOYEE_KEY_PREFIX, REPORT_KEY_PREFIX
from ..core.enums import ReportStatus, Role
from ..reports.model import EODReport, report_id_for
from ..reports.repository import KeyValueReportRepository
from ..shifts.hours import compute_hours
from ..shifts.model import WorkShift
from ..storage.repository import KeyValueStore
from ..users.model import User
from ..users.repository import KeyValueUserRepository

logger = logging.getLogger(__name__)

DEMO_COMPANY_ID = "test-company"
DEMO_OWNER_EMAIL = "amanda@example.com"
DEMO_OWNER_PASSWORD = "demo1234"
DEMO_HISTORY_DAYS = 14
DEMO_TEAM_DAYS = 7

DEMO_EMPLOYEES = [
    ("Sarah Johnson", "Frontend Developer", "sarah@example.com"),
    ("Emily Rodriguez", "UX Designer", "emily@example.com"),
    ("James Wilson", "Backend Developer", "james@example.com"),
    ("Michael Brown", "Project Manager", "michael@example.com"),
    ("Jessica Taylor", "QA Engineer", "jessica@example.com"),
    ("David Martinez", "DevOps Engineer", "david@example.com"),
    ("Jennifer Garcia", "Product Manager", "jennifer@example.com"),
    ("Robert Miller", "Data Scientist", "robert@example.com"),
    ("Lisa Anderson", "Marketing Specialist", "lisa@example.com"),
    ("Kevin Thomas", "Sales Representative", "kevin@example.com"),
]

_ROLE_SUMMARIES = {
    "Developer": "Worked on implementing new features. Fixed bugs in the user interface. Participated in code review with the team.",
    "Designer": "Finished the wireframes for the mobile app redesign. Conducted user interviews and gathered feedback.",
    "Manager": "Led team meeting and sprint planning. Updated project timelines and resource allocation.",
}
_DEFAULT_SUMMARY = "Completed assigned tasks for the current sprint. Participated in team meetings and provided updates."

_HISTORY_SUMMARIES = [
    "Worked on frontend components for the dashboard. Fixed responsive layout issues on mobile.",
    "Implemented API integration with backend services. Added error handling and loading states.",
    "Refactored stylesheets. Improved button and form components.",
    "Created unit tests for core utilities. Fixed failing tests in CI pipeline.",
    "Participated in sprint planning and estimated upcoming tasks. Updated documentation.",
    "Collaborated with design team on new features. Built interactive prototypes.",
    "Code review and pair programming with junior devs. Knowledge sharing session.",
]


def demo_employee_id(index: int) -> str:
    return f"test-employee-{index + 1}"


def _summary_for(position: str) -> str:
    for keyword, text in _ROLE_SUMMARIES.items():
        if keyword in position:
            return text
    return _DEFAULT_SUMMARY


def _history_shifts(days_ago: int) -> tuple[WorkShift, ...]:
    if days_ago % 4 == 0:
        return (WorkShift(id=f"s{days_ago}-1", start_time="22:00", end_time="06:00", break_minutes=30, description="Night shift"),)
    if days_ago % 3 == 0:
        return (
            WorkShift(id=f"s{days_ago}-1", start_time="09:00", end_time="12:00", description="Morning session"),
            WorkShift(id=f"s{days_ago}-2", start_time="14:00", end_time="18:00", break_minutes=15, description="Afternoon session"),
        )
    return (WorkShift(id=f"s{days_ago}-1", start_time="09:00", end_time="17:30", break_minutes=45, description="Regular day"),)


def _report(employee_id: str, day: str, summary: str, shifts, status: ReportStatus, stamp: str) -> EODReport:
    return EODReport(
        id=report_id_for(employee_id, day),
        employee_id=employee_id,
        company_id=DEMO_COMPANY_ID,
        work_date=day,
        summary=summary,
        shifts=tuple(shifts),
        total_hours=compute_hours(shifts),
        status=status,
        created_at=stamp,
        updated_at=stamp,
        submitted_at=stamp if status == ReportStatus.SUBMITTED else None,
    )


def clear_demo_data(store: KeyValueStore, today: date) -> None:
    for index in range(len(DEMO_EMPLOYEES)):
        employee_id = demo_employee_id(index)
        store.remove(f"{EMPLOYEE_KEY_PREFIX}{employee_id}")
        for days_ago in range(DEMO_HISTORY_DAYS + 1):
            day = (today - timedelta(days=days_ago)).isoformat()
            store.remove(f"{REPORT_KEY_PREFIX}{report_id_for(employee_id, day)}")


def seed_demo_company(store: KeyValueStore, today: date) -> Company:
    clear_demo_data(store, today)
    stamp = now_iso()

    companies = KeyValueCompanyRepository(store)
    employees_repo = KeyValueEmployeeRepository(store)
    reports = KeyValueReportRepository(store)
    users = KeyValueUserRepository(store)

    users.save(
        User(
            id="test-user",
            email=DEMO_OWNER_EMAIL,
            name="Amanda Thompson",
            role=Role.EMPLOYER,
            created_at=stamp,
            password_hash=generate_password_hash(DEMO_OWNER_PASSWORD),
            company_id=DEMO_COMPANY_ID,
        )
    )

    company = Company(
        id=DEMO_COMPANY_ID,
        name="Acme Inc",
        timezone="America/New_York",
        owner_id="test-user",
        created_at=stamp,
        description="A test company for demonstration purposes",
    )
    companies.save(company)

    employees = []
    for index, (name, position, email) in enumerate(DEMO_EMPLOYEES):
        employee = Employee(
            id=demo_employee_id(index),
            name=name,
            access_code=f"TEST{1000 + index}",
            company_id=DEMO_COMPANY_ID,
            created_at=stamp,
            email=email,
            position=position,
        )
        employees_repo.save(employee)
        employees.append(employee)

    # Team activity: three or four reports a day for the last week.
    for days_ago in range(DEMO_TEAM_DAYS):
        day = (today - timedelta(days=days_ago)).isoformat()
        shift = WorkShift(
            id=f"team-{days_ago}",
            start_time="08:00",
            end_time="16:00",
            break_minutes=60,
            description="Early shift" if days_ago % 2 == 0 else "Regular shift",
        )
        for k in range(3 + days_ago % 2):
            employee = employees[(days_ago * 3 + k) % len(employees)]
            reports.save(_report(employee.id, day, _summary_for(employee.position or ""), [shift], ReportStatus.SUBMITTED, stamp))

    # Two weeks of history for the first employee, plus today's draft.
    first = employees[0]
    for days_ago in range(1, DEMO_HISTORY_DAYS + 1):
        day = (today - timedelta(days=days_ago)).isoformat()
        summary = _HISTORY_SUMMARIES[days_ago % len(_HISTORY_SUMMARIES)]
        reports.save(_report(first.id, day, summary, _history_shifts(days_ago), ReportStatus.SUBMITTED, stamp))

    draft_shift = WorkShift(id="today-1", start_time="09:00", end_time="13:00", break_minutes=15, description="Morning session")
    reports.save(
        _report(
            first.id,
            today.isoformat(),
            "Started working on the new notification system. Currently implementing the UI components.",
            [draft_shift],
            ReportStatus.DRAFT,
            stamp,
        )
    )

    logger.info("Seeded demo company %s with %d employees", DEMO_COMPANY_ID, len(employees))
    return company
