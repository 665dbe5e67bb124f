"""Group employees by department and rank departments by average salary."""

from __future__ import annotations

import math
import sys
from collections import defaultdict
from dataclasses import dataclass, field
from statistics import fmean
from typing import Iterable


@dataclass(frozen=True)
class Employee:
    """A member of staff with a salary and a department."""

    name: str
    salary: float
    department: str


@dataclass
class Department:
    """A department, its members and their average salary."""

    name: str
    employees: list[Employee]
    average: float = field(init=False)

    def __post_init__(self) -> None:
        if self.employees:
            self.average = fmean(e.salary for e in self.employees)
        else:
            self.average = math.nan


SAMPLE_EMPLOYEES = (
    Employee("Alice", 3000, "IT"),
    Employee("Vadya", 4000, "HR"),
    Employee("Petya", 5500, "IT"),
    Employee("Egor", 4000, "IT"),
    Employee("Vlad", 4000, "HR"),
    Employee("Maxim", 2000, "Sales"),
    Employee("Masha", 3500, "Sales"),
)


def _number(value: float) -> str:
    return f"{value:g}"


def group_by_department(employees: Iterable[Employee]) -> list[Department]:
    """Group employees into departments ordered by falling average salary.

    Members of a department are ordered by falling salary, then by name.
    Departments with equal averages keep alphabetical order.
    """
    groups: dict[str, list[Employee]] = defaultdict(list)
    for employee in employees:
        groups[employee.department].append(employee)

    departments = [
        Department(name, sorted(members, key=lambda e: (-e.salary, e.name)))
        for name, members in sorted(groups.items())
    ]
    departments.sort(key=lambda d: d.average, reverse=True)
    return departments


def format_departments(departments: Iterable[Department]) -> str:
    """Render departments and their members as a text report."""
    lines = ["Департаменты по убыванию средней зарплаты:"]
    for department in departments:
        lines.append(f"{department.name} (ср. зарплата: {_number(department.average)}):")
        lines.extend(
            f"  {employee.name} ({_number(employee.salary)})"
            for employee in department.employees
        )
    return "\n".join(lines) + "\n"


def demo() -> str:
    """Write the report for the built-in sample staff and return it."""
    departments = group_by_department(SAMPLE_EMPLOYEES)
    report = format_departments(departments)
    sys.stdout.write(report)
    return report