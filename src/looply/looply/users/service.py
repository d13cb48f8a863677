from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_iso
from ..common.ids import generate_id
from ..common.validators import require_min_length, require_non_empty
from ..companies.service import CompanyService
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: str
    name: str
    role: Role
    email: str
    company_id: Optional[str]

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "name": self.name,
            "role": self.role.value,
            "email": self.email,
            "companyId": self.company_id,
        }


def _to_session(user: User) -> SessionUser:
    return SessionUser(
        user_id=user.id,
        name=user.name,
        role=user.role,
        email=user.email,
        company_id=user.company_id,
    )


class AuthService:
    """Use cases: sign up, sign in (password or access code), company assignment."""

    def __init__(self, users: UserRepository, companies: CompanyService):
        self._users = users
        self._companies = companies

    def sign_up(self, email: str, password: str, name: str, role: Role = Role.EMPLOYER) -> SessionUser:
        email = require_non_empty(email, "Email").lower()
        name = require_non_empty(name, "Name")
        require_min_length(password, "Password", 6)

        if role != Role.EMPLOYER:
            raise ValidationError("Employees sign in with an access code")
        if self._users.get_by_email(email):
            raise ValidationError("User already exists")

        user = User(
            id=generate_id(),
            email=email,
            name=name,
            role=role,
            created_at=now_iso(),
            password_hash=generate_password_hash(password),
        )
        self._users.save(user)
        logger.info("Signed up %s", email)
        return _to_session(user)

    def sign_in(self, email: str, password: str) -> SessionUser:
        user = self._users.get_by_email(email or "")
        if not user or not user.password_hash:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. unknown hashing method in a stored value
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")
        return _to_session(user)

    def sign_in_with_access_code(self, access_code: str) -> SessionUser:
        employee = self._companies.find_by_access_code(access_code)
        if not employee or not employee.is_active:
            raise AuthenticationError("Invalid access code")

        user = self._users.get_for_employee(employee.id)
        if not user:
            user = User(
                id=employee.id,
                email=employee.email or "",
                name=employee.name,
                role=Role.EMPLOYEE,
                created_at=employee.created_at,
                company_id=employee.company_id,
                access_code=employee.access_code,
                position=employee.position,
                avatar=employee.avatar,
            )
            self._users.save(user)
            logger.info("Created sign-in record for employee %s", employee.id)
        return _to_session(user)

    def assign_company(self, *, email: str, company_id: str) -> SessionUser:
        user = self._users.get_by_email(email)
        if not user:
            raise AuthenticationError("Unknown user")
        if user.role != Role.EMPLOYER:
            raise AuthorizationError("Only employers own companies")

        updated = replace(user, company_id=company_id)
        self._users.save(updated)
        return _to_session(updated)
