"""
Payroll component.

Functions take Payable, never a base class that unpaid roles could sneak
through.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .ports import Payable

logger = logging.getLogger(__name__)


def total_payroll(payables: Iterable[Payable]) -> float:
    """Sum of salaries; safe for every Payable."""
    return sum((p.get_salary() for p in payables), 0.0)


def payable_staff(members: Iterable[object]) -> list[Payable]:
    """
    Filter a mixed roster down to the members that are Payable.

    Args:
        members: Any staff objects (Employee, Intern, ...)

    Returns:
        Payable members, in roster order
    """
    payables: list[Payable] = []
    for member in members:
        if isinstance(member, Payable):
            payables.append(member)
        else:
            logger.debug(f"Skipping non-payable member: {type(member).__name__}")
    return payables


def roster_payroll(members: Iterable[object]) -> float:
    """Total payroll for a mixed roster."""
    return total_payroll(payable_staff(members))
