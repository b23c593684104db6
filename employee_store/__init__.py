"""
Employee Store - an in-memory employee record store.

This package provides a validated, single-process employee table with:

- Validated create/read/update/delete keyed by employee id
- Attribute search (department, name, rating floor, salary range)
- Deterministic orderings and top-K selection
- Salary and performance aggregation, including a bulk raise

Mutations are reported to an injected observer; the default observer logs
through the standard logging tree.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from employee_store.config import Settings, get_settings
from employee_store.domain import (
    ActiveUpdate,
    DepartmentSummary,
    DepartmentUpdate,
    DuplicateKeyError,
    Employee,
    EmployeeStoreError,
    FieldUpdate,
    InvalidDepartmentError,
    InvalidFieldError,
    InvalidInputError,
    InvalidPercentageError,
    InvalidRangeError,
    InvalidRecordError,
    InvalidSalaryError,
    InvalidValueError,
    NameUpdate,
    NotFoundError,
    PerformanceBand,
    PerformanceRatingUpdate,
    SalaryBracket,
    SalaryUpdate,
    YearsOfExperienceUpdate,
    field_update,
)
from employee_store.engines import AggregationEngine, Ordering, OrderingEngine, QueryEngine
from employee_store.observers import (
    EventKind,
    LoggingObserver,
    RecordingObserver,
    StoreEvent,
    StoreObserver,
)
from employee_store.store import EmployeeStore
from employee_store.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Store and engines
    "EmployeeStore",
    "QueryEngine",
    "Ordering",
    "OrderingEngine",
    "AggregationEngine",
    # Models
    "Employee",
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
    # Observers
    "EventKind",
    "StoreEvent",
    "StoreObserver",
    "LoggingObserver",
    "RecordingObserver",
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
    # Logging
    "configure_logging",
    "get_logger",
]
