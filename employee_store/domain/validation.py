"""
Validation rules applied before any mutation of the store.

Each `check_*` function returns the accepted value or raises the matching
`EmployeeStoreError`. The `is_*` predicates are side-effect free and are
shared with the query and aggregation engines for parameter checks.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import AbstractSet, Any

from employee_store.domain.errors import (
    InvalidDepartmentError,
    InvalidRecordError,
    InvalidSalaryError,
    InvalidValueError,
)
from employee_store.domain.models import Employee

MIN_RATING = 0.0
MAX_RATING = 5.0


def is_number(value: Any) -> bool:
    """True for real numbers; bool is rejected even though it subclasses int."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def is_valid_rating(value: Any) -> bool:
    return is_number(value) and MIN_RATING <= value <= MAX_RATING


def check_key(key: Any) -> int:
    if key is None:
        raise InvalidValueError("id", "Employee id can not be null")
    if not is_integer(key):
        raise InvalidValueError("id", f"Employee id must be an integer, got {type(key).__name__}")
    if key < 0:
        raise InvalidValueError("id", f"Employee id must be >= 0, got {key}")
    return key


def check_name(name: Any) -> str:
    if not isinstance(name, str):
        raise InvalidValueError("name", f"Name must be a string, got {type(name).__name__}")
    if not name.strip():
        raise InvalidValueError("name", "Name can not be empty")
    return name


def check_department(department: Any, valid_departments: AbstractSet[str]) -> str:
    if not isinstance(department, str):
        raise InvalidValueError(
            "department", f"Department must be a string, got {type(department).__name__}"
        )
    if not department.strip() or department not in valid_departments:
        raise InvalidDepartmentError(department, valid_departments)
    return department


def check_salary(salary: Any) -> float:
    if not is_number(salary):
        raise InvalidValueError("salary", f"Salary must be a number, got {type(salary).__name__}")
    if not math.isfinite(salary) or salary < 0:
        raise InvalidSalaryError(f"Salary must be a finite value >= 0, got {salary}")
    return float(salary)


def check_rating(rating: Any) -> float:
    if not is_number(rating):
        raise InvalidValueError(
            "performance_rating",
            f"Performance rating must be a number, got {type(rating).__name__}",
        )
    if not MIN_RATING <= rating <= MAX_RATING:
        raise InvalidValueError(
            "performance_rating",
            f"Performance rating must be between {MIN_RATING:g} and {MAX_RATING:g}, got {rating}",
        )
    return float(rating)


def check_experience(years: Any) -> int:
    if not is_integer(years):
        raise InvalidValueError(
            "years_of_experience",
            f"Years of experience must be an integer, got {type(years).__name__}",
        )
    if years < 0:
        raise InvalidValueError(
            "years_of_experience", f"Years of experience must be >= 0, got {years}"
        )
    return years


def check_active(active: Any) -> bool:
    if not isinstance(active, bool):
        raise InvalidValueError("active", f"Active must be a boolean, got {type(active).__name__}")
    return active


def check_employee(employee: Any, valid_departments: AbstractSet[str]) -> Employee:
    """
    Run every rule against a candidate record.

    Rules are applied in a fixed order (id, name, department, salary, rating,
    experience, active) so the first violation reported is deterministic.
    """
    if employee is None:
        raise InvalidRecordError()
    if not isinstance(employee, Employee):
        raise InvalidRecordError(f"Expected an Employee, got {type(employee).__name__}")

    check_key(employee.id)
    check_name(employee.name)
    check_department(employee.department, valid_departments)
    check_salary(employee.salary)
    check_rating(employee.performance_rating)
    check_experience(employee.years_of_experience)
    check_active(employee.active)
    return employee


__all__ = [
    "MIN_RATING",
    "MAX_RATING",
    "is_number",
    "is_integer",
    "is_blank",
    "is_valid_rating",
    "check_key",
    "check_name",
    "check_department",
    "check_salary",
    "check_rating",
    "check_experience",
    "check_active",
    "check_employee",
]
