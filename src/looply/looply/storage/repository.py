from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence


class KeyValueStore(Protocol):
    """Storage capability the services depend on.

    Values are JSON-compatible dicts. Implementations decide how they are
    persisted; services only rely on these four operations.
    """

    def get(self, key: str) -> Optional[dict[str, Any]]:
        raise NotImplementedError

    def set(self, key: str, value: dict[str, Any]) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError

    def scan_by_prefix(self, prefix: str) -> Sequence[dict[str, Any]]:
        raise NotImplementedError
