"""
In-memory employee store with validated CRUD.

The store owns the mapping of employee id to `Employee`. Every mutation is
gated by the validation rules and reported to the injected observer; every
rejected mutation is reported too, then raised to the caller.

Records are frozen models, so `all()` and every value returned here is safe
to hand out: changing a record means replacing it through `update`.

Usage:
    from employee_store import Employee, EmployeeStore

    store = EmployeeStore(departments=["IT", "HR"])
    store.create(Employee(id=1, name="A", department="IT", salary=75_000,
                          performance_rating=4.2, years_of_experience=5))
    store.update(1, "salary", 80_000)
"""

from __future__ import annotations

import threading
from typing import Any, Dict, FrozenSet, Iterable, Iterator, Optional, Tuple

from employee_store.config import DEFAULT_DEPARTMENTS, Settings
from employee_store.domain.errors import (
    DuplicateKeyError,
    EmployeeStoreError,
    InvalidFieldError,
    InvalidRecordError,
    InvalidValueError,
    NotFoundError,
)
from employee_store.domain.fields import FieldUpdate, field_update, updatable_fields
from employee_store.domain.models import Employee, EmployeeId
from employee_store.domain.validation import check_employee
from employee_store.observers import EventKind, LoggingObserver, StoreEvent, StoreObserver


class EmployeeStore:
    """
    Single-owner, in-memory employee table.

    Parameters
    ----------
    departments : iterable[str] | None
        Valid department names, frozen for the lifetime of the store.
        Defaults to `DEFAULT_DEPARTMENTS`.
    observer : StoreObserver | None
        Receives a `StoreEvent` for each mutation and each rejected mutation.
        Defaults to a `LoggingObserver`.
    """

    def __init__(
        self,
        departments: Optional[Iterable[str]] = None,
        observer: Optional[StoreObserver] = None,
    ) -> None:
        self._departments: FrozenSet[str] = frozenset(
            DEFAULT_DEPARTMENTS if departments is None else departments
        )
        if not self._departments:
            raise ValueError("A store needs at least one valid department")
        self._observer: StoreObserver = observer if observer is not None else LoggingObserver()
        self._records: Dict[EmployeeId, Employee] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_settings(
        cls, settings: Settings, observer: Optional[StoreObserver] = None
    ) -> "EmployeeStore":
        return cls(departments=settings.valid_departments, observer=observer)

    @property
    def departments(self) -> FrozenSet[str]:
        return self._departments

    @property
    def lock(self) -> threading.RLock:
        """Re-entrant lock held by every mutation; hold it to batch several."""
        return self._lock

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __iter__(self) -> Iterator[Employee]:
        return iter(self.all())

    def _rejected(self, operation: str, key: Any, error: EmployeeStoreError) -> None:
        self._observer.notify(
            StoreEvent(
                kind=EventKind.VALIDATION_FAILED,
                operation=operation,
                key=key,
                detail={"error_kind": error.kind, "error": str(error)},
            )
        )

    def create(self, employee: Employee) -> EmployeeId:
        """
        Insert a new record and return its key.

        Raises
        ------
        InvalidRecordError
            If `employee` is None or not an `Employee`.
        DuplicateKeyError
            If a record with the same id already exists; it is left untouched.
        InvalidDepartmentError, InvalidSalaryError, InvalidValueError
            If any field breaks a validation rule.
        """
        key = getattr(employee, "id", None)
        with self._lock:
            try:
                if employee is None:
                    raise InvalidRecordError()
                if not isinstance(employee, Employee):
                    raise InvalidRecordError(f"Expected an Employee, got {type(employee).__name__}")
                if employee.id in self._records:
                    raise DuplicateKeyError(employee.id)
                check_employee(employee, self._departments)
            except EmployeeStoreError as exc:
                self._rejected("create", key, exc)
                raise

            self._records[employee.id] = employee
            self._observer.notify(
                StoreEvent(
                    kind=EventKind.CREATED,
                    operation="create",
                    key=employee.id,
                    detail={"department": employee.department},
                )
            )
        return employee.id

    def read(self, key: EmployeeId) -> Employee:
        try:
            return self._records[key]
        except KeyError:
            raise NotFoundError(key) from None

    def update(self, key: EmployeeId, field: FieldUpdate | str, value: Any = None) -> Employee:
        """
        Replace one attribute of an existing record and return the new record.

        `field` is either a `FieldUpdate` (and `value` is omitted) or a field
        name resolved through `field_update`. On any failure the stored record
        is unchanged.

        Raises
        ------
        NotFoundError
            If no record has this key.
        InvalidFieldError
            If `field` names no updatable attribute, or is a `FieldUpdate`
            that targets none.
        InvalidValueError, InvalidDepartmentError, InvalidSalaryError
            If the new value has the wrong type or breaks a rule.
        """
        with self._lock:
            try:
                current = self.read(key)
                if isinstance(field, FieldUpdate):
                    if getattr(type(field), "attribute", None) is None:
                        raise InvalidFieldError(type(field).__name__, updatable_fields())
                    if value is not None:
                        raise InvalidValueError(
                            field.attribute, "Pass either a FieldUpdate or a field name and value"
                        )
                    change = field
                else:
                    change = field_update(field, value)
                updated = change.apply(current, self._departments)
            except EmployeeStoreError as exc:
                self._rejected("update", key, exc)
                raise

            self._records[key] = updated
            self._observer.notify(
                StoreEvent(
                    kind=EventKind.UPDATED,
                    operation="update",
                    key=key,
                    detail={
                        "field": change.attribute,
                        "old_value": getattr(current, change.attribute),
                        "new_value": getattr(updated, change.attribute),
                    },
                )
            )
        return updated

    def delete(self, key: EmployeeId) -> Employee:
        """Remove a record and return it."""
        with self._lock:
            try:
                removed = self._records.pop(key)
            except KeyError:
                error = NotFoundError(key)
                self._rejected("delete", key, error)
                raise error from None
            self._observer.notify(
                StoreEvent(kind=EventKind.DELETED, operation="delete", key=key)
            )
        return removed

    def all(self) -> Tuple[Employee, ...]:
        """Point-in-time snapshot of every record, in insertion order."""
        with self._lock:
            return tuple(self._records.values())


__all__ = ["EmployeeStore"]
