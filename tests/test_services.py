from __future__ import annotations

import pytest

from src.looply.looply.core.enums import Role
from src.looply.looply.core.exceptions import (
    AuthenticationError,
    EmployeeNotFound,
    ValidationError,
)


def test_sign_up_then_sign_in(container):
    auth = container.auth_service
    created = auth.sign_up("Amanda@Example.com", "secret123", "Amanda")

    signed_in = auth.sign_in("amanda@example.com", "secret123")

    assert signed_in.user_id == created.user_id
    assert signed_in.role == Role.EMPLOYER


def test_password_is_not_stored_in_plain_text(container, store):
    container.auth_service.sign_up("a@example.com", "secret123", "A")
    record = store.get("user:a@example.com")
    assert record["passwordHash"] != "secret123"


def test_sign_up_duplicate_rejected(container):
    container.auth_service.sign_up("a@example.com", "secret123", "A")
    with pytest.raises(ValidationError):
        container.auth_service.sign_up("a@example.com", "other123", "B")


def test_auth_wrong_password_raises(container):
    container.auth_service.sign_up("a@example.com", "right-pw", "A")
    with pytest.raises(AuthenticationError):
        container.auth_service.sign_in("a@example.com", "wrong-pw")


def test_unknown_user_raises(container):
    with pytest.raises(AuthenticationError):
        container.auth_service.sign_in("nobody@example.com", "whatever")


def test_access_code_sign_in_creates_employee_user(container, store):
    employee = container.company_service.add_employee("c1", "Sarah", email="sarah@example.com")

    s_user = container.auth_service.sign_in_with_access_code(employee.access_code.lower())

    assert s_user.user_id == employee.id
    assert s_user.role == Role.EMPLOYEE
    assert s_user.company_id == "c1"
    assert store.get(f"user:employee:{employee.id}")["name"] == "Sarah"


def test_access_code_of_inactive_employee_rejected(container):
    employee = container.company_service.add_employee("c1", "Sarah")
    container.company_service.set_employee_active(employee.id, is_active=False)
    with pytest.raises(AuthenticationError):
        container.auth_service.sign_in_with_access_code(employee.access_code)


def test_invalid_access_code_rejected(container):
    with pytest.raises(AuthenticationError):
        container.auth_service.sign_in_with_access_code("NOPE0000")


def test_assign_company(container):
    auth = container.auth_service
    s_user = auth.sign_up("boss@example.com", "secret123", "Boss")
    company = container.company_service.create_company("Acme", "UTC", s_user.user_id)

    updated = auth.assign_company(email="boss@example.com", company_id=company.id)

    assert updated.company_id == company.id
    assert auth.sign_in("boss@example.com", "secret123").company_id == company.id


def test_roster_is_scoped_by_company(container):
    companies = container.company_service
    companies.add_employee("c1", "A")
    companies.add_employee("c1", "B")
    companies.add_employee("c2", "C")

    assert sorted(e.name for e in companies.get_employees("c1")) == ["A", "B"]
    assert companies.count_active_employees("c2") == 1


def test_access_codes_are_short_upper_case(container):
    employee = container.company_service.add_employee("c1", "A")
    assert len(employee.access_code) == 8
    assert employee.access_code == employee.access_code.upper()


def test_remove_employee(container):
    companies = container.company_service
    employee = companies.add_employee("c1", "A")

    companies.remove_employee(employee.id)

    assert companies.get_employee(employee.id) is None
    with pytest.raises(EmployeeNotFound):
        companies.remove_employee(employee.id)


def test_employee_name_required(container):
    with pytest.raises(ValidationError):
        container.company_service.add_employee("c1", "   ")
