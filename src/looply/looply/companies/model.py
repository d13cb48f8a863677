from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.constants import DEFAULT_TIMEZONE


@dataclass(frozen=True)
class Company:
    """Domain entity: the organization an employer owns."""

    id: str
    name: str
    timezone: str
    owner_id: str
    created_at: str
    description: Optional[str] = None
    logo: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Company":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            timezone=str(data.get("timezone") or DEFAULT_TIMEZONE),
            owner_id=str(data.get("ownerId", "")),
            created_at=str(data.get("createdAt", "")),
            description=data.get("description"),
            logo=data.get("logo"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "timezone": self.timezone,
            "ownerId": self.owner_id,
            "createdAt": self.created_at,
            "description": self.description,
            "logo": self.logo,
        }


@dataclass(frozen=True)
class Employee:
    """Domain entity: a roster entry. Employees sign in with `access_code`."""

    id: str
    name: str
    access_code: str
    company_id: str
    created_at: str
    email: Optional[str] = None
    position: Optional[str] = None
    avatar: Optional[str] = None
    is_active: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            access_code=str(data.get("accessCode", "")),
            company_id=str(data.get("companyId", "")),
            created_at=str(data.get("createdAt", "")),
            email=data.get("email"),
            position=data.get("position"),
            avatar=data.get("avatar"),
            # absent flag means active
            is_active=data.get("isActive") is not False,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "accessCode": self.access_code,
            "companyId": self.company_id,
            "createdAt": self.created_at,
            "email": self.email,
            "position": self.position,
            "avatar": self.avatar,
            "isActive": self.is_active,
        }
