from __future__ import annotations

import pytest
from pydantic import ValidationError

from employee_store.domain.errors import (
    DuplicateKeyError,
    InvalidDepartmentError,
    InvalidFieldError,
    InvalidRecordError,
    InvalidSalaryError,
    InvalidValueError,
    NotFoundError,
)
from employee_store.domain.fields import DepartmentUpdate, FieldUpdate, SalaryUpdate
from employee_store.observers import EventKind, LoggingObserver
from employee_store.store import EmployeeStore


def test_create_then_read_round_trips(store, make_employee):
    employee = make_employee(id=1001, name="John Doe")

    key = store.create(employee)

    assert key == 1001
    assert store.read(1001) == employee
    assert len(store) == 1
    assert 1001 in store


def test_create_rejects_none(store):
    with pytest.raises(InvalidRecordError):
        store.create(None)
    assert len(store) == 0


def test_create_rejects_duplicate_key_without_overwriting(store, make_employee):
    original = make_employee(id=1001, name="John Doe")
    store.create(original)

    with pytest.raises(DuplicateKeyError) as exc_info:
        store.create(make_employee(id=1001, name="Different Name", department="Finance"))

    assert exc_info.value.kind == "DuplicateKey"
    assert store.read(1001) == original
    assert len(store) == 1


def test_create_with_unknown_department_leaves_store_unchanged(store, make_employee):
    with pytest.raises(InvalidDepartmentError) as exc_info:
        store.create(make_employee(department="Unknown"))

    assert exc_info.value.department == "Unknown"
    assert "IT" in exc_info.value.valid_departments
    assert "Unknown" in str(exc_info.value)
    assert len(store) == 0


def test_create_rejects_negative_salary(store, make_employee):
    with pytest.raises(InvalidSalaryError):
        store.create(make_employee(salary=-5_000.0))
    assert len(store) == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "   "},
        {"performance_rating": 5.5},
        {"performance_rating": -0.1},
        {"years_of_experience": -1},
        {"id": -1},
    ],
)
def test_create_rejects_out_of_range_values(store, make_employee, overrides):
    with pytest.raises(InvalidValueError):
        store.create(make_employee(**overrides))
    assert len(store) == 0


def test_boundary_values_are_accepted(store, make_employee):
    store.create(make_employee(id=0, salary=0.0, performance_rating=0.0, years_of_experience=0))
    store.create(make_employee(id=1, performance_rating=5.0))
    assert len(store) == 2


def test_records_are_immutable(store, make_employee):
    store.create(make_employee(id=1))
    with pytest.raises(ValidationError):
        store.read(1).salary = 1.0  # type: ignore[misc]


def test_employee_rejects_wrong_shapes(make_employee):
    with pytest.raises(ValidationError):
        make_employee(salary="lots")
    with pytest.raises(ValidationError):
        make_employee(years_of_experience=2.5)


def test_read_missing_key_raises_not_found(store):
    with pytest.raises(NotFoundError) as exc_info:
        store.read(42)
    assert exc_info.value.kind == "NotFound"


def test_update_by_field_name(store, make_employee):
    store.create(make_employee(id=1, salary=75_000.0))

    updated = store.update(1, "salary", 80_000)

    assert updated.salary == 80_000.0
    assert store.read(1).salary == 80_000.0


@pytest.mark.parametrize(
    "field, value, attribute",
    [
        ("name", "Jane Roe", "name"),
        ("department", "HR", "department"),
        ("performanceRating", 3.1, "performance_rating"),
        ("yearsOfExperience", 9, "years_of_experience"),
        ("isActive", False, "active"),
        ("active", False, "active"),
    ],
)
def test_update_accepts_each_field(store, make_employee, field, value, attribute):
    store.create(make_employee(id=1))

    updated = store.update(1, field, value)

    assert getattr(updated, attribute) == value


def test_update_with_typed_variant(store, make_employee):
    store.create(make_employee(id=1))

    store.update(1, DepartmentUpdate(value="Finance"))

    assert store.read(1).department == "Finance"


def test_update_missing_key_raises_not_found(store):
    with pytest.raises(NotFoundError):
        store.update(99, "salary", 1_000)


@pytest.mark.parametrize(
    "field, value, error",
    [
        ("employeeId", 5, InvalidFieldError),
        ("bonus", 5, InvalidFieldError),
        ("salary", "a lot", InvalidValueError),
        ("salary", -1, InvalidSalaryError),
        ("department", "Legal", InvalidDepartmentError),
        ("performanceRating", 7, InvalidValueError),
        ("yearsOfExperience", -3, InvalidValueError),
        ("name", "", InvalidValueError),
        ("active", "yes", InvalidValueError),
    ],
)
def test_failed_update_leaves_record_unchanged(store, make_employee, field, value, error):
    original = make_employee(id=1)
    store.create(original)

    with pytest.raises(error):
        store.update(1, field, value)

    assert store.read(1) == original


def test_type_mismatch_and_range_violation_are_distinguishable(store, make_employee):
    store.create(make_employee(id=1))

    with pytest.raises(InvalidValueError) as wrong_shape:
        store.update(1, "performanceRating", "high")
    with pytest.raises(InvalidValueError) as out_of_range:
        store.update(1, "performanceRating", 9.0)

    assert "type" in str(wrong_shape.value).lower()
    assert "between" in str(out_of_range.value)


def test_update_rejects_variant_with_extra_value(store, make_employee):
    store.create(make_employee(id=1))
    with pytest.raises(InvalidValueError):
        store.update(1, SalaryUpdate(value=1.0), 2.0)


def test_update_rejects_base_field_update(store, observer, make_employee):
    original = make_employee(id=1)
    store.create(original)

    with pytest.raises(InvalidFieldError):
        store.update(1, FieldUpdate())

    assert store.read(1) == original
    assert observer.kinds()[-1] == EventKind.VALIDATION_FAILED


def test_delete_returns_removed_record(store, make_employee):
    employee = make_employee(id=7)
    store.create(employee)

    removed = store.delete(7)

    assert removed == employee
    assert 7 not in store
    with pytest.raises(NotFoundError):
        store.delete(7)


def test_snapshot_is_not_affected_by_later_mutations(store, make_employee):
    store.create(make_employee(id=1, salary=50_000.0))
    snapshot = store.all()

    store.update(1, "salary", 60_000.0)
    store.create(make_employee(id=2))
    store.delete(1)

    assert len(snapshot) == 1
    assert snapshot[0].salary == 50_000.0


def test_observer_sees_mutations_and_rejections(store, observer, make_employee):
    store.create(make_employee(id=1))
    store.update(1, "salary", 90_000)
    with pytest.raises(DuplicateKeyError):
        store.create(make_employee(id=1))
    store.delete(1)

    assert observer.kinds() == [
        EventKind.CREATED,
        EventKind.UPDATED,
        EventKind.VALIDATION_FAILED,
        EventKind.DELETED,
    ]
    updated = observer.events[1]
    assert updated.detail["field"] == "salary"
    assert updated.detail["new_value"] == 90_000.0
    rejected = observer.events[2]
    assert rejected.operation == "create"
    assert rejected.detail["error_kind"] == "DuplicateKey"


def test_custom_departments_are_fixed_at_construction(make_employee, observer):
    store = EmployeeStore(departments=["Research"], observer=observer)

    store.create(make_employee(id=1, department="Research"))
    with pytest.raises(InvalidDepartmentError):
        store.create(make_employee(id=2, department="IT"))

    assert store.departments == frozenset({"Research"})


def test_default_observer_logs_mutations(make_employee, caplog):
    store = EmployeeStore()
    assert isinstance(store._observer, LoggingObserver)

    with caplog.at_level("INFO", logger="employee_store.store"):
        store.create(make_employee(id=1))
        with pytest.raises(InvalidSalaryError):
            store.update(1, "salary", -10)

    messages = [record.getMessage() for record in caplog.records]
    assert any("[CREATE]" in message for message in messages)
    assert any("[UPDATE REJECTED]" in message for message in messages)
