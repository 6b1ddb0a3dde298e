"""
Payroll component ports.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Payable(Protocol):
    """
    Anything that is owed a salary.

    Implemented only by types that can always return one. Unpaid roles do
    not implement it and cannot be passed where a Payable is expected.
    """

    def get_salary(self) -> float: ...
