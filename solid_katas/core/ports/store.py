"""
Record store port interface.

Persistence collaborator for payments and orders. Takes a plain record and
returns nothing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class RecordStorePort(Protocol):
    """Port for saving a record to durable storage."""

    def save(self, kind: str, record: Mapping[str, Any]) -> None:
        """
        Persist a record.

        Args:
            kind: Record category ("payment", "order")
            record: Plain field values; must not contain raw card numbers
        """
        ...
