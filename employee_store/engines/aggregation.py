"""
Salary and performance aggregation.

`raise_salary_by_rating` is the only operation here with a side effect; it
goes through the store's validated update path. Everything else reads a
snapshot and returns fresh values.
"""

from __future__ import annotations

import math
import statistics
from typing import Dict, List, Optional, Sequence, Tuple

from employee_store.domain.errors import (
    InvalidDepartmentError,
    InvalidInputError,
    InvalidPercentageError,
)
from employee_store.domain.fields import SalaryUpdate
from employee_store.domain.models import (
    DepartmentSummary,
    Employee,
    PerformanceBand,
    SalaryBracket,
)
from employee_store.domain.validation import (
    MAX_RATING,
    MIN_RATING,
    check_salary,
    is_number,
    is_valid_rating,
)
from employee_store.engines.query import QueryEngine
from employee_store.store import EmployeeStore
from employee_store.utils.logging import get_logger

log = get_logger(__name__)

# (label, lower inclusive, upper exclusive); None means unbounded
PERFORMANCE_BANDS: Tuple[Tuple[str, float, Optional[float]], ...] = (
    ("Outstanding", 4.5, None),
    ("Excellent", 4.0, 4.5),
    ("Good", 3.5, 4.0),
    ("Average", 3.0, 3.5),
    ("Below Average", 0.0, 3.0),
)

SALARY_BRACKETS: Tuple[Tuple[str, float, Optional[float]], ...] = (
    ("Below $50,000", 0.0, 50_000.0),
    ("$50,000 - $70,000", 50_000.0, 70_000.0),
    ("$70,000 - $90,000", 70_000.0, 90_000.0),
    ("$90,000 - $110,000", 90_000.0, 110_000.0),
    ("$110,000 and above", 110_000.0, None),
)


def _in_range(value: float, lower: float, upper: Optional[float]) -> bool:
    return value >= lower and (upper is None or value < upper)


def _mean(values: Sequence[float]) -> float:
    return statistics.fmean(values) if values else 0.0


class AggregationEngine:
    """Grouped averages, report aggregates, and the bulk salary raise."""

    def __init__(self, store: EmployeeStore) -> None:
        self._store = store
        self._queries = QueryEngine(store)

    def raise_salary_by_rating(self, min_rating: float, percentage: float) -> List[Employee]:
        """
        Raise by `percentage` the salary of everyone rated at least `min_rating`.

        `percentage` is a fraction: 0.10 raises salaries by ten percent. Every
        new salary is validated before any is written, and the store lock is
        held for the whole batch. Returns the updated records ordered by id.

        Raises
        ------
        InvalidInputError
            If `min_rating` is outside the rating scale.
        InvalidPercentageError
            If `percentage` is negative, not finite, or not a number.
        InvalidSalaryError
            If a raised salary would not be finite; nothing is written.
        """
        if not is_valid_rating(min_rating):
            raise InvalidInputError(
                f"Minimum rating must be between {MIN_RATING:g} and {MAX_RATING:g}, got {min_rating!r}"
            )
        if not is_number(percentage) or not math.isfinite(percentage) or percentage < 0:
            raise InvalidPercentageError(
                f"Raise percentage must be a finite value >= 0, got {percentage!r}"
            )

        with self._store.lock:
            qualifying = sorted(
                (emp for emp in self._store.all() if emp.performance_rating >= min_rating),
                key=lambda emp: emp.id,
            )
            changes = []
            for employee in qualifying:
                new_salary = employee.salary + employee.salary * percentage
                check_salary(new_salary)
                changes.append((employee.id, SalaryUpdate(value=new_salary)))
            raised = [self._store.update(key, change) for key, change in changes]

        log.info(
            f"[SALARY RAISE] {len(raised)} employee(s) rated >= {min_rating}",
            extra={"min_rating": min_rating, "percentage": percentage, "raised": len(raised)},
        )
        return raised

    def average_salary(self, department: str) -> float:
        """Mean salary of active and inactive employees; 0.0 for an empty department."""
        if department not in self._store.departments:
            raise InvalidDepartmentError(department, self._store.departments)
        return _mean([emp.salary for emp in self._store.all() if emp.department == department])

    def average_salary_per_department(self) -> Dict[str, float]:
        return {
            department: _mean([emp.salary for emp in members])
            for department, members in self._queries.group_by_department().items()
        }

    def department_summary(self) -> List[DepartmentSummary]:
        groups = self._queries.group_by_department()
        return [
            DepartmentSummary(
                department=department,
                headcount=len(groups[department]),
                average_salary=_mean([emp.salary for emp in groups[department]]),
                average_experience=_mean([emp.years_of_experience for emp in groups[department]]),
                average_rating=_mean([emp.performance_rating for emp in groups[department]]),
            )
            for department in sorted(groups)
        ]

    def performance_bands(self) -> List[PerformanceBand]:
        employees = self._store.all()
        bands = []
        for label, lower, upper in PERFORMANCE_BANDS:
            members = [emp for emp in employees if _in_range(emp.performance_rating, lower, upper)]
            bands.append(
                PerformanceBand(
                    label=label,
                    lower=lower,
                    upper=upper,
                    headcount=len(members),
                    average_salary=_mean([emp.salary for emp in members]),
                )
            )
        return bands

    def salary_distribution(self) -> List[SalaryBracket]:
        employees = self._store.all()
        return [
            SalaryBracket(
                label=label,
                lower=lower,
                upper=upper,
                headcount=sum(1 for emp in employees if _in_range(emp.salary, lower, upper)),
            )
            for label, lower, upper in SALARY_BRACKETS
        ]


__all__ = [
    "PERFORMANCE_BANDS",
    "SALARY_BRACKETS",
    "AggregationEngine",
]
