from __future__ import annotations

import copy
from typing import Any, Optional, Sequence

from .repository import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store used for development and tests.

    Values are deep-copied in and out so callers never share state with the store.
    Prefix scans return values in insertion order.
    """

    def __init__(self, initial: Optional[dict[str, dict[str, Any]]] = None):
        self._data: dict[str, dict[str, Any]] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str) -> Optional[dict[str, Any]]:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    def set(self, key: str, value: dict[str, Any]) -> None:
        self._data[key] = copy.deepcopy(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def scan_by_prefix(self, prefix: str) -> Sequence[dict[str, Any]]:
        return [copy.deepcopy(v) for k, v in self._data.items() if k.startswith(prefix)]

    def keys(self, prefix: str = "") -> list[str]:
        return [k for k in self._data if k.startswith(prefix)]

    def __len__(self) -> int:
        return len(self._data)
