from __future__ import annotations

import json
import logging
from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .repository import KeyValueStore

logger = logging.getLogger(__name__)


def escape_like(prefix: str) -> str:
    """Escape LIKE wildcards so a prefix only matches literally."""
    return prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _decode(key: str, raw: Any) -> Optional[dict[str, Any]]:
    if raw is None:
        return None
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if isinstance(raw, dict):
        return raw
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Skipping undecodable value for key %s", key)
        return None
    return value if isinstance(value, dict) else None


class MySQLKeyValueStore(KeyValueStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT k, v FROM kv_store WHERE k=%s", (key,))
            r = fetchone(cur)
            if not r:
                return None
            return _decode(r["k"], r["v"])

    def set(self, key: str, value: dict[str, Any]) -> None:
        payload = json.dumps(value, ensure_ascii=False)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_store (k, v)
                VALUES (%s, %s)
                ON DUPLICATE KEY UPDATE v=VALUES(v)
                """,
                (key, payload),
            )

    def remove(self, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM kv_store WHERE k=%s", (key,))

    def scan_by_prefix(self, prefix: str) -> Sequence[dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT k, v
                FROM kv_store
                WHERE k LIKE %s
                ORDER BY k
                """,
                (escape_like(prefix) + "%",),
            )
            rows = fetchall(cur)

        out = []
        for r in rows:
            value = _decode(r["k"], r["v"])
            if value is not None:
                out.append(value)
        return out
