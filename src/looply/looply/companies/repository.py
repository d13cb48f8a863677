from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.constants import COMPANY_KEY_PREFIX, EMPLOYEE_KEY_PREFIX
from ..storage.repository import KeyValueStore
from .model import Company, Employee


class CompanyRepository(Protocol):
    def get(self, company_id: str) -> Optional[Company]:
        raise NotImplementedError

    def save(self, company: Company) -> None:
        raise NotImplementedError


class EmployeeRepository(Protocol):
    def get(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def save(self, employee: Employee) -> None:
        raise NotImplementedError

    def remove(self, employee_id: str) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError


class KeyValueCompanyRepository(CompanyRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self, company_id: str) -> Optional[Company]:
        data = self._store.get(f"{COMPANY_KEY_PREFIX}{company_id}")
        return Company.from_dict(data) if data else None

    def save(self, company: Company) -> None:
        self._store.set(f"{COMPANY_KEY_PREFIX}{company.id}", company.to_dict())


class KeyValueEmployeeRepository(EmployeeRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self, employee_id: str) -> Optional[Employee]:
        data = self._store.get(f"{EMPLOYEE_KEY_PREFIX}{employee_id}")
        return Employee.from_dict(data) if data else None

    def save(self, employee: Employee) -> None:
        self._store.set(f"{EMPLOYEE_KEY_PREFIX}{employee.id}", employee.to_dict())

    def remove(self, employee_id: str) -> None:
        self._store.remove(f"{EMPLOYEE_KEY_PREFIX}{employee_id}")

    def list_all(self) -> Sequence[Employee]:
        return [Employee.from_dict(d) for d in self._store.scan_by_prefix(EMPLOYEE_KEY_PREFIX)]
