"""
Domain models for the employee store.

`Employee` is the record held by the store. It enforces value *shapes*
(strict types) while range rules live in `employee_store.domain.validation`,
so the store can report the specific error kind for each violation. The
remaining models are read-only aggregates produced by the aggregation engine.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

EmployeeId = int


class Employee(BaseModel):
    """
    One employee's attribute set, keyed by `id`.
    """

    id: EmployeeId = Field(..., alias="employeeId", description="Unique employee identifier.")
    name: str = Field(..., description="Full name.")
    department: str = Field(..., description="Department name.")
    salary: float = Field(..., description="Annual salary.")
    performance_rating: float = Field(
        ..., alias="performanceRating", description="Performance rating between 0 and 5."
    )
    years_of_experience: int = Field(
        ..., alias="yearsOfExperience", description="Whole years of experience."
    )
    active: bool = Field(True, alias="isActive", description="Whether the employee is active.")

    model_config = {
        "frozen": True,
        "strict": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }


class DepartmentSummary(BaseModel):
    """Headcount and averages for one department."""

    department: str
    headcount: int
    average_salary: float
    average_experience: float
    average_rating: float

    model_config = {"frozen": True}


class PerformanceBand(BaseModel):
    """Employees whose rating falls in ``[lower, upper)``."""

    label: str
    lower: float
    upper: float | None = None
    headcount: int = 0
    average_salary: float = 0.0

    model_config = {"frozen": True}


class SalaryBracket(BaseModel):
    """Employees whose salary falls in ``[lower, upper)``."""

    label: str
    lower: float
    upper: float | None = None
    headcount: int = 0

    model_config = {"frozen": True}


__all__ = [
    "EmployeeId",
    "Employee",
    "DepartmentSummary",
    "PerformanceBand",
    "SalaryBracket",
]
