"""
Filter and grouping queries over a store snapshot.

Queries never mutate and always return new containers; records themselves
are frozen, so results stay valid after the store changes.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, List

from employee_store.domain.errors import (
    InvalidDepartmentError,
    InvalidInputError,
    InvalidRangeError,
    InvalidSalaryError,
)
from employee_store.domain.models import Employee
from employee_store.domain.validation import (
    MAX_RATING,
    MIN_RATING,
    is_blank,
    is_number,
    is_valid_rating,
)
from employee_store.store import EmployeeStore


class QueryEngine:
    """Attribute-based search over an `EmployeeStore`."""

    def __init__(self, store: EmployeeStore) -> None:
        self._store = store

    def _select(self, predicate: Callable[[Employee], bool]) -> List[Employee]:
        return [employee for employee in self._store.all() if predicate(employee)]

    def by_department(self, department: str) -> List[Employee]:
        if department not in self._store.departments:
            raise InvalidDepartmentError(department, self._store.departments)
        return self._select(lambda emp: emp.department == department)

    def by_name_contains(self, substring: str) -> List[Employee]:
        """Case-insensitive substring match on the name."""
        if is_blank(substring):
            raise InvalidInputError("Name search text can not be blank")
        needle = substring.casefold()
        return self._select(lambda emp: needle in emp.name.casefold())

    def by_rating_at_least(self, minimum: float) -> List[Employee]:
        if not is_valid_rating(minimum):
            raise InvalidInputError(
                f"Minimum rating must be between {MIN_RATING:g} and {MAX_RATING:g}, got {minimum!r}"
            )
        return self._select(lambda emp: emp.performance_rating >= minimum)

    def by_salary_between(self, minimum: float, maximum: float) -> List[Employee]:
        """Records with ``minimum <= salary <= maximum``."""
        if not (is_number(minimum) and is_number(maximum)):
            raise InvalidInputError("Salary bounds must be numbers")
        if not (math.isfinite(minimum) and math.isfinite(maximum)):
            raise InvalidInputError(
                f"Salary bounds must be finite (min={minimum}, max={maximum})"
            )
        if minimum < 0 or maximum < 0:
            raise InvalidSalaryError(
                f"Salary bounds can not be negative (min={minimum}, max={maximum})"
            )
        if minimum > maximum:
            raise InvalidRangeError(
                f"Minimum salary {minimum} is greater than maximum salary {maximum}"
            )
        return self._select(lambda emp: minimum <= emp.salary <= maximum)

    def group_by_department(self) -> Dict[str, List[Employee]]:
        groups: Dict[str, List[Employee]] = {}
        for employee in self._store.all():
            groups.setdefault(employee.department, []).append(employee)
        return groups


__all__ = ["QueryEngine"]
