from __future__ import annotations

import secrets
import string
import uuid

from ..core.constants import ACCESS_CODE_LENGTH

_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_id() -> str:
    return uuid.uuid4().hex


def generate_access_code(length: int = ACCESS_CODE_LENGTH) -> str:
    """Short login code handed to an employee. Not a secret."""
    return "".join(secrets.choice(_CODE_ALPHABET) for _ in range(length))
