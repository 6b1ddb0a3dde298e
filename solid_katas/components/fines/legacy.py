"""
Fine calculation before the Open/Closed refactor.

Every new member type means editing `calculate`. Kept so the refactored
policies can be checked against it branch by branch.
"""

from __future__ import annotations


class FineCalculator:
    def calculate(self, member_type: str, days: int) -> float:
        if member_type == "regular":
            return days * 1.0
        elif member_type == "vip":
            return days * 0.5
        elif member_type == "staff":
            return 0.0

        return 0.0
