"""
Fine policy variants.

One class per member type, each implementing FinePolicy.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DailyRateFine:
    """Fine of `rate` per overdue day."""

    rate: float = 1.0

    def calculate_fine(self, days: int) -> float:
        return days * self.rate


@dataclass(frozen=True)
class RegularFine(DailyRateFine):
    rate: float = 1.0


@dataclass(frozen=True)
class VipFine(DailyRateFine):
    rate: float = 0.5


@dataclass(frozen=True)
class StaffFine:
    def calculate_fine(self, days: int) -> float:
        return 0.0


@dataclass(frozen=True)
class NoFine:
    """Fallback for member types without a policy."""

    def calculate_fine(self, days: int) -> float:
        return 0.0
