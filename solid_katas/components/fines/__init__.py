"""
Fines component (Open/Closed).

Overdue fines computed through one policy object per member type.
"""

from .component import (
    build_fine_policies,
    calculate_fine,
    resolve_fine_policy,
    run,
)
from .legacy import FineCalculator
from .models import FineInput, FineOutput, MemberType
from .policies import DailyRateFine, NoFine, RegularFine, StaffFine, VipFine
from .ports import FinePolicy

__all__ = [
    # Functions
    "build_fine_policies",
    "calculate_fine",
    "resolve_fine_policy",
    "run",
    # Models
    "FineInput",
    "FineOutput",
    "MemberType",
    # Policies
    "DailyRateFine",
    "NoFine",
    "RegularFine",
    "StaffFine",
    "VipFine",
    # Ports
    "FinePolicy",
    # Before refactor
    "FineCalculator",
]
