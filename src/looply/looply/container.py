from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .companies.repository import KeyValueCompanyRepository, KeyValueEmployeeRepository
from .companies.service import CompanyService
from .database.connection import DBConfig, DatabaseConnection
from .reports.repository import KeyValueReportRepository
from .reports.service import ReportService
from .shifts.calculator.standard_calculator import StandardHoursCalculator
from .storage.memory_store import InMemoryKeyValueStore
from .storage.mysql_store import MySQLKeyValueStore
from .storage.repository import KeyValueStore
from .users.repository import KeyValueUserRepository
from .users.service import AuthService

STORAGE_BACKENDS = ("memory", "mysql")


@dataclass(frozen=True)
class Container:
    store: KeyValueStore
    conn: Optional[DatabaseConnection]

    companies_repo: KeyValueCompanyRepository
    employees_repo: KeyValueEmployeeRepository
    reports_repo: KeyValueReportRepository
    users_repo: KeyValueUserRepository

    company_service: CompanyService
    report_service: ReportService
    auth_service: AuthService


def build_store(*, storage_backend: str, db_config: Optional[dict] = None) -> tuple[KeyValueStore, Optional[DatabaseConnection]]:
    if storage_backend == "memory":
        return InMemoryKeyValueStore(), None
    if storage_backend == "mysql":
        conn = DatabaseConnection(DBConfig.from_dict(db_config or {}))
        return MySQLKeyValueStore(conn), conn
    raise ValueError(f"Unknown storage backend {storage_backend!r} (expected one of {STORAGE_BACKENDS})")


def build_container(
    *,
    storage_backend: str = "memory",
    db_config: Optional[dict] = None,
    store: Optional[KeyValueStore] = None,
) -> Container:
    conn = None
    if store is None:
        store, conn = build_store(storage_backend=storage_backend, db_config=db_config)

    companies_repo = KeyValueCompanyRepository(store)
    employees_repo = KeyValueEmployeeRepository(store)
    reports_repo = KeyValueReportRepository(store)
    users_repo = KeyValueUserRepository(store)

    company_service = CompanyService(companies_repo, employees_repo)
    report_service = ReportService(reports_repo, company_service, calculator=StandardHoursCalculator())
    auth_service = AuthService(users_repo, company_service)

    return Container(
        store=store,
        conn=conn,
        companies_repo=companies_repo,
        employees_repo=employees_repo,
        reports_repo=reports_repo,
        users_repo=users_repo,
        company_service=company_service,
        report_service=report_service,
        auth_service=auth_service,
    )
