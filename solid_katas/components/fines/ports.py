"""
Fines component ports.

The capability every fine variant implements.
"""

from __future__ import annotations

from typing import Protocol


class FinePolicy(Protocol):
    """
    Fine policy for one kind of member.

    Implementations:
    - RegularFine: full daily rate
    - VipFine: half daily rate
    - StaffFine: never fined
    - DailyRateFine: any rate configured in rules.yaml
    - NoFine: fallback for unknown member types

    A new member type is a new implementation; existing policies and their
    callers stay untouched.
    """

    def calculate_fine(self, days: int) -> float:
        """
        Fine owed for `days` overdue days.

        Must return a float for every non-negative `days` and never raise.
        """
        ...
