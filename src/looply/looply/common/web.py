from __future__ import annotations

from functools import wraps

from flask import request, session

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            raise AuthenticationError("Please sign in to continue")
        return view(*args, **kwargs)

    return wrapper


def role_required(role: Role):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                raise AuthenticationError("Please sign in to continue")
            if session.get("role") != role.value:
                raise AuthorizationError("You do not have access to this page")
            return view(*args, **kwargs)

        return wrapper

    return decorator


employer_required = role_required(Role.EMPLOYER)
employee_required = role_required(Role.EMPLOYEE)


def require_own_company(company_id: str) -> None:
    """Employers only see their own company."""
    if session.get("company_id") != company_id:
        raise AuthorizationError("You do not have access to this company")


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        if request.is_json or request.get_data(cache=True):
            raise ValidationError("Request body must be a JSON object")
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
