"""
Sample rosters for demos and tests.

`demo_employees` is a fixed ten-person roster. `generate_employees` produces
deterministic pseudo-random employees from a seed.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence

from employee_store.config import DEFAULT_DEPARTMENTS
from employee_store.domain.models import Employee
from employee_store.store import EmployeeStore

_DEMO_ROSTER = (
    (1001, "John Smith", "IT", 78_500.0, 4.2, 5, True),
    (1002, "Sarah Johnson", "HR", 65_000.0, 4.5, 3, True),
    (1003, "Michael Chen", "Finance", 85_000.0, 3.8, 7, True),
    (1004, "Emily Davis", "IT", 92_000.0, 4.8, 6, True),
    (1005, "Robert Wilson", "Marketing", 72_000.0, 3.5, 4, True),
    (1006, "Jessica Brown", "HR", 67_500.0, 4.0, 2, True),
    (1007, "David Lee", "IT", 115_000.0, 4.7, 9, True),
    (1008, "Amanda Miller", "Finance", 79_000.0, 3.9, 5, True),
    (1009, "Thomas Garcia", "Marketing", 68_000.0, 2.8, 3, False),
    (1010, "Jennifer Taylor", "Sales", 108_000.0, 4.6, 8, True),
)

_FIRST_NAMES = ("Ana", "Ben", "Chloe", "Dev", "Elena", "Farid", "Grace", "Hiro", "Ines", "Jonas")
_LAST_NAMES = ("Alvarez", "Brooks", "Chen", "Dubois", "Eze", "Fischer", "Gupta", "Haddad")


def demo_employees() -> List[Employee]:
    return [
        Employee(
            id=emp_id,
            name=name,
            department=department,
            salary=salary,
            performance_rating=rating,
            years_of_experience=years,
            active=active,
        )
        for emp_id, name, department, salary, rating, years, active in _DEMO_ROSTER
    ]


def generate_employees(
    count: int,
    seed: int = 42,
    departments: Sequence[str] = DEFAULT_DEPARTMENTS,
    start_id: int = 1,
) -> List[Employee]:
    """
    Generate `count` valid employees with consecutive ids from `start_id`.
    """
    if count < 0:
        raise ValueError("count must be >= 0")
    rng = random.Random(seed)
    employees: List[Employee] = []
    for offset in range(count):
        years = rng.randint(0, 25)
        employees.append(
            Employee(
                id=start_id + offset,
                name=f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}",
                department=rng.choice(list(departments)),
                salary=round(rng.uniform(35_000, 140_000) + years * 1_000, 2),
                performance_rating=round(rng.uniform(1.0, 5.0), 1),
                years_of_experience=years,
                active=rng.random() > 0.1,
            )
        )
    return employees


def load(store: EmployeeStore, employees: Optional[Iterable[Employee]] = None) -> EmployeeStore:
    """Create every employee in `store` (the demo roster by default) and return it."""
    for employee in demo_employees() if employees is None else employees:
        store.create(employee)
    return store


__all__ = ["demo_employees", "generate_employees", "load"]
