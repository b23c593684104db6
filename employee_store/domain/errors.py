"""
Error taxonomy for the employee store.

Every validation failure surfaces as a subclass of `EmployeeStoreError`. The
`kind` attribute names the failure category so a presentation layer can show
it without inspecting the concrete class.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple


class EmployeeStoreError(Exception):
    """Base class for all store, query, and aggregation failures."""

    kind: str = "EmployeeStoreError"
    default_message: str = "Employee store operation failed"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidRecordError(EmployeeStoreError):
    kind = "InvalidRecord"
    default_message = "Employee can not be empty"


class DuplicateKeyError(EmployeeStoreError):
    kind = "DuplicateKey"
    default_message = "Employee already exists"

    def __init__(self, key: Any, message: Optional[str] = None) -> None:
        self.key = key
        super().__init__(message or f"Employee with id {key!r} already exists")


class NotFoundError(EmployeeStoreError):
    kind = "NotFound"
    default_message = "Employee searched not found"

    def __init__(self, key: Any, message: Optional[str] = None) -> None:
        self.key = key
        super().__init__(message or f"Employee with id {key!r} not found")


class InvalidDepartmentError(EmployeeStoreError):
    """Raised for a department outside the store's valid set."""

    kind = "InvalidDepartment"
    default_message = "Department provided not found"

    def __init__(self, department: Any, valid_departments: Iterable[str]) -> None:
        self.department = department
        self.valid_departments: Tuple[str, ...] = tuple(sorted(valid_departments))
        super().__init__(
            f"Invalid department {department!r}. "
            f"Valid options: {', '.join(self.valid_departments)}"
        )


class InvalidSalaryError(EmployeeStoreError):
    kind = "InvalidSalary"
    default_message = "Salary provided is invalid"


class InvalidValueError(EmployeeStoreError):
    """Raised when a field value has the wrong shape or is out of range."""

    kind = "InvalidValue"
    default_message = "Invalid field value"

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message or f"Invalid value for {field}")


class InvalidFieldError(EmployeeStoreError):
    kind = "InvalidField"
    default_message = "Unknown field"

    def __init__(self, field: Any, valid_fields: Iterable[str] = ()) -> None:
        self.field = field
        self.valid_fields: Tuple[str, ...] = tuple(valid_fields)
        message = f"Unknown field {field!r}"
        if self.valid_fields:
            message += f". Updatable fields: {', '.join(self.valid_fields)}"
        super().__init__(message)


class InvalidInputError(EmployeeStoreError):
    kind = "InvalidInput"
    default_message = "Invalid query parameter"


class InvalidRangeError(EmployeeStoreError):
    kind = "InvalidRange"
    default_message = "Minimum must not exceed maximum"


class InvalidPercentageError(EmployeeStoreError):
    kind = "InvalidPercentage"
    default_message = "Percentage must not be negative"


__all__ = [
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
