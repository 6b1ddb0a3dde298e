"""
Payroll component (Liskov Substitution).

Salaries are asked only of Payable staff; interns are not Payable.
"""

from . import legacy
from .component import payable_staff, roster_payroll, total_payroll
from .models import DEFAULT_SALARY, Employee, Intern, StaffProfile
from .ports import Payable

__all__ = [
    "payable_staff",
    "roster_payroll",
    "total_payroll",
    "DEFAULT_SALARY",
    "Employee",
    "Intern",
    "StaffProfile",
    "Payable",
    "legacy",
]
