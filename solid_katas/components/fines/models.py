"""
Fines component models.

Data models for overdue fine calculation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# Known member types. Any other string is accepted and fined at zero, hence
# fields typed `MemberType | str`.
MemberType = Literal["regular", "vip", "staff"]


@dataclass(frozen=True)
class FineInput:
    """Input for calculating an overdue fine."""

    member_type: MemberType | str
    days: int


@dataclass(frozen=True)
class FineOutput:
    """Output from fine calculation."""

    member_type: MemberType | str
    days: int
    amount: float
    policy: str  # Name of the variant that produced the amount
