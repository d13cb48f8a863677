from __future__ import annotations

from typing import Optional, Protocol

from ..core.constants import USER_KEY_PREFIX
from ..storage.repository import KeyValueStore
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def get_for_employee(self, employee_id: str) -> Optional[User]:
        raise NotImplementedError

    def save(self, user: User) -> None:
        raise NotImplementedError


class KeyValueUserRepository(UserRepository):
    """Employers live under `user:<email>`, employees under `user:employee:<id>`."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    @staticmethod
    def _email_key(email: str) -> str:
        return f"{USER_KEY_PREFIX}{email.strip().lower()}"

    @staticmethod
    def _employee_key(employee_id: str) -> str:
        return f"{USER_KEY_PREFIX}employee:{employee_id}"

    def get_by_email(self, email: str) -> Optional[User]:
        data = self._store.get(self._email_key(email))
        return User.from_dict(data) if data else None

    def get_for_employee(self, employee_id: str) -> Optional[User]:
        data = self._store.get(self._employee_key(employee_id))
        return User.from_dict(data) if data else None

    def save(self, user: User) -> None:
        if user.password_hash is None and user.access_code:
            self._store.set(self._employee_key(user.id), user.to_dict())
        else:
            self._store.set(self._email_key(user.email), user.to_dict())
