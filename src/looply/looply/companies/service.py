from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_iso
from ..common.ids import generate_access_code, generate_id
from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_TIMEZONE
from ..core.exceptions import CompanyNotFound, EmployeeNotFound
from .model import Company, Employee
from .repository import CompanyRepository, EmployeeRepository

logger = logging.getLogger(__name__)


class CompanyService:
    """Use case: manage a company and its employee roster (employer)."""

    def __init__(
        self,
        companies: CompanyRepository,
        employees: EmployeeRepository,
        *,
        id_factory: Callable[[], str] = generate_id,
        code_factory: Callable[[], str] = generate_access_code,
    ):
        self._companies = companies
        self._employees = employees
        self._new_id = id_factory
        self._new_code = code_factory

    def create_company(
        self,
        name: str,
        timezone: str,
        owner_id: str,
        logo: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Company:
        company = Company(
            id=self._new_id(),
            name=require_non_empty(name, "Company name"),
            timezone=optional_text(timezone) or DEFAULT_TIMEZONE,
            owner_id=require_non_empty(owner_id, "Owner"),
            created_at=now_iso(),
            description=optional_text(description),
            logo=optional_text(logo),
        )
        self._companies.save(company)
        logger.info("Created company %s (%s)", company.id, company.name)
        return company

    def get_company(self, company_id: str) -> Optional[Company]:
        return self._companies.get(company_id)

    def require_company(self, company_id: str) -> Company:
        company = self._companies.get(company_id)
        if not company:
            raise CompanyNotFound(f"Company {company_id} not found")
        return company

    def add_employee(
        self,
        company_id: str,
        name: str,
        email: Optional[str] = None,
        position: Optional[str] = None,
    ) -> Employee:
        employee = Employee(
            id=self._new_id(),
            name=require_non_empty(name, "Employee name"),
            access_code=self._new_code(),
            company_id=require_non_empty(company_id, "Company"),
            created_at=now_iso(),
            email=optional_text(email),
            position=optional_text(position),
        )
        self._employees.save(employee)
        logger.info("Added employee %s to company %s", employee.id, company_id)
        return employee

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def get_employees(self, company_id: str) -> Sequence[Employee]:
        return [e for e in self._employees.list_all() if e.company_id == company_id]

    def find_by_access_code(self, access_code: str) -> Optional[Employee]:
        code = (access_code or "").strip().upper()
        if not code:
            return None
        return next((e for e in self._employees.list_all() if e.access_code.upper() == code), None)

    def count_active_employees(self, company_id: str) -> int:
        return sum(1 for e in self.get_employees(company_id) if e.is_active)

    def set_employee_active(self, employee_id: str, *, is_active: bool) -> Employee:
        employee = self._employees.get(employee_id)
        if not employee:
            raise EmployeeNotFound(f"Employee {employee_id} not found")
        updated = replace(employee, is_active=bool(is_active))
        self._employees.save(updated)
        logger.info("Employee %s active=%s", employee_id, updated.is_active)
        return updated

    def remove_employee(self, employee_id: str) -> None:
        if not self._employees.get(employee_id):
            raise EmployeeNotFound(f"Employee {employee_id} not found")
        self._employees.remove(employee_id)
        logger.info("Removed employee %s", employee_id)
