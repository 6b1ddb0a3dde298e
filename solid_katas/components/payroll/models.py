"""
Payroll component models.

Employee and Intern share profile fields through composition; only Employee
is Payable.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SALARY = 5000.0


@dataclass(frozen=True)
class StaffProfile:
    """Fields common to every staff member."""

    name: str
    department: str | None = None


@dataclass(frozen=True)
class Employee:
    profile: StaffProfile
    salary: float = DEFAULT_SALARY

    def get_salary(self) -> float:
        return self.salary


@dataclass(frozen=True)
class Intern:
    # Unpaid: deliberately has no get_salary
    profile: StaffProfile
