"""
Named total orders and top-K selection.

Each ordering sorts one attribute descending and breaks ties by id ascending,
so the output is deterministic for any store contents.
"""

from __future__ import annotations

import heapq
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from employee_store.domain.errors import InvalidInputError
from employee_store.domain.models import Employee
from employee_store.domain.validation import is_integer
from employee_store.store import EmployeeStore

DEFAULT_TOP_K = 5

SortKey = Callable[[Employee], Tuple[Any, ...]]


def salary_desc(employee: Employee) -> Tuple[float, int]:
    return (-employee.salary, employee.id)


def performance_desc(employee: Employee) -> Tuple[float, int]:
    return (-employee.performance_rating, employee.id)


def experience_desc(employee: Employee) -> Tuple[int, int]:
    return (-employee.years_of_experience, employee.id)


class Ordering(str, Enum):
    SALARY = "salary"
    PERFORMANCE = "performance"
    EXPERIENCE = "experience"

    @property
    def sort_key(self) -> SortKey:
        return _SORT_KEYS[self]


_SORT_KEYS: Dict[Ordering, SortKey] = {
    Ordering.SALARY: salary_desc,
    Ordering.PERFORMANCE: performance_desc,
    Ordering.EXPERIENCE: experience_desc,
}


class OrderingEngine:
    """Sorted views and top-K selection over an `EmployeeStore`."""

    def __init__(self, store: EmployeeStore, default_top_k: int = DEFAULT_TOP_K) -> None:
        if default_top_k <= 0:
            raise ValueError("default_top_k must be positive")
        self._store = store
        self._default_top_k = default_top_k

    def sorted_by(self, ordering: Ordering | str) -> List[Employee]:
        try:
            order = Ordering(ordering)
        except ValueError:
            options = ", ".join(o.value for o in Ordering)
            raise InvalidInputError(f"Unknown ordering {ordering!r}. Available: {options}") from None
        return sorted(self._store.all(), key=order.sort_key)

    def sorted_by_salary(self) -> List[Employee]:
        return self.sorted_by(Ordering.SALARY)

    def sorted_by_performance(self) -> List[Employee]:
        return self.sorted_by(Ordering.PERFORMANCE)

    def sorted_by_experience(self) -> List[Employee]:
        return self.sorted_by(Ordering.EXPERIENCE)

    def top_paid(self, n: Optional[int] = None) -> List[Employee]:
        """
        The `n` highest-paid employees, highest first.

        Returns every record when `n` exceeds the store size. Selection is a
        bounded heap over the snapshot, O(len * log n).
        """
        count = self._default_top_k if n is None else n
        if not is_integer(count) or count <= 0:
            raise InvalidInputError(f"Number of employees must be a positive integer, got {n!r}")
        return heapq.nsmallest(count, self._store.all(), key=salary_desc)


__all__ = [
    "DEFAULT_TOP_K",
    "Ordering",
    "OrderingEngine",
    "salary_desc",
    "performance_desc",
    "experience_desc",
]
