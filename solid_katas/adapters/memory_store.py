"""
In-memory record store (RecordStorePort implementation).

Stands in for the database in dev and tests. Records are copied on save so
later mutation by the caller cannot change what was "persisted".
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredRecord:
    kind: str
    data: dict[str, Any]


@dataclass
class InMemoryRecordStore:
    records: list[StoredRecord] = field(default_factory=list)

    def save(self, kind: str, record: Mapping[str, Any]) -> None:
        self.records.append(StoredRecord(kind=kind, data=dict(record)))
        logger.info(f"SAVE (memory): kind={kind}, fields={sorted(record)}")

    def get_by_kind(self, kind: str) -> list[StoredRecord]:
        """Get all records of one kind, in save order."""
        return [r for r in self.records if r.kind == kind]

    def clear(self) -> None:
        self.records.clear()

    @property
    def record_count(self) -> int:
        return len(self.records)
