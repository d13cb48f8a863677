from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: someone who can sign in.

    Employers sign in with email and password; employees with their access code,
    in which case `id` is the employee id and `password_hash` is empty.
    """

    id: str
    email: str
    name: str
    role: Role
    created_at: str
    password_hash: Optional[str] = None
    company_id: Optional[str] = None
    access_code: Optional[str] = None
    position: Optional[str] = None
    avatar: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        return cls(
            id=str(data["id"]),
            email=str(data.get("email") or ""),
            name=str(data.get("name", "")),
            role=Role(data.get("role", Role.EMPLOYER.value)),
            created_at=str(data.get("createdAt", "")),
            password_hash=data.get("passwordHash"),
            company_id=data.get("companyId"),
            access_code=data.get("accessCode"),
            position=data.get("position"),
            avatar=data.get("avatar"),
        )

    def to_dict(self) -> dict:
        out = {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role.value,
            "createdAt": self.created_at,
            "companyId": self.company_id,
            "accessCode": self.access_code,
            "position": self.position,
            "avatar": self.avatar,
        }
        if self.password_hash:
            out["passwordHash"] = self.password_hash
        return out
