"""
Payroll before the Liskov Substitution fix.

Intern inherits Employee but cannot honour get_salary, so any code written
against Employee breaks when handed an Intern.
"""

from __future__ import annotations


class Employee:
    def get_salary(self) -> float:
        return 5000.0


class Intern(Employee):
    def get_salary(self) -> float:
        raise RuntimeError("Interns are unpaid")


def total_salaries(employees: list[Employee]) -> float:
    return sum(e.get_salary() for e in employees)
