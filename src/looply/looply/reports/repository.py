from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.constants import REPORT_KEY_PREFIX
from ..storage.repository import KeyValueStore
from .model import EODReport


class ReportRepository(Protocol):
    def get(self, report_id: str) -> Optional[EODReport]:
        raise NotImplementedError

    def save(self, report: EODReport) -> None:
        """Upsert by report id."""

        raise NotImplementedError

    def list_all(self) -> Sequence[EODReport]:
        raise NotImplementedError


class KeyValueReportRepository(ReportRepository):
    """Reports stored as `eod:<id>` records in a key-value store."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    @staticmethod
    def _key(report_id: str) -> str:
        return f"{REPORT_KEY_PREFIX}{report_id}"

    def get(self, report_id: str) -> Optional[EODReport]:
        data = self._store.get(self._key(report_id))
        return EODReport.from_dict(data) if data else None

    def save(self, report: EODReport) -> None:
        self._store.set(self._key(report.id), report.to_dict())

    def list_all(self) -> Sequence[EODReport]:
        return [EODReport.from_dict(d) for d in self._store.scan_by_prefix(REPORT_KEY_PREFIX)]
