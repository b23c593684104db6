"""
Domain package for the employee store.

Exports the record model, the error taxonomy, and the typed field updates.
Keep this package focused on data definitions and validation concerns.
"""

from employee_store.domain.errors import (
    DuplicateKeyError,
    EmployeeStoreError,
    InvalidDepartmentError,
    InvalidFieldError,
    InvalidInputError,
    InvalidPercentageError,
    InvalidRangeError,
    InvalidRecordError,
    InvalidSalaryError,
    InvalidValueError,
    NotFoundError,
)
from employee_store.domain.fields import (
    ActiveUpdate,
    DepartmentUpdate,
    FieldUpdate,
    NameUpdate,
    PerformanceRatingUpdate,
    SalaryUpdate,
    YearsOfExperienceUpdate,
    field_update,
)
from employee_store.domain.models import (
    DepartmentSummary,
    Employee,
    EmployeeId,
    PerformanceBand,
    SalaryBracket,
)

__all__ = [
    # Models
    "Employee",
    "EmployeeId",
    "DepartmentSummary",
    "PerformanceBand",
    "SalaryBracket",
    # Field updates
    "FieldUpdate",
    "NameUpdate",
    "DepartmentUpdate",
    "SalaryUpdate",
    "PerformanceRatingUpdate",
    "YearsOfExperienceUpdate",
    "ActiveUpdate",
    "field_update",
    # Errors
    "EmployeeStoreError",
    "InvalidRecordError",
    "DuplicateKeyError",
    "NotFoundError",
    "InvalidDepartmentError",
    "InvalidSalaryError",
    "InvalidValueError",
    "InvalidFieldError",
    "InvalidInputError",
    "InvalidRangeError",
    "InvalidPercentageError",
]
