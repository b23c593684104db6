"""
Pytest configuration for the employee store.

Provides fixtures for:
- Settings isolation (the cached settings are cleared around every test)
- An empty store wired to a recording observer
- The three-employee store used by the scenario tests
"""

from __future__ import annotations

from typing import Any, Callable, Generator

import pytest

from employee_store.config import get_settings
from employee_store.domain.models import Employee
from employee_store.observers import RecordingObserver
from employee_store.store import EmployeeStore


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_employee() -> Callable[..., Employee]:
    """
    Factory for valid employees; keyword arguments override the defaults.
    """

    def _make(**overrides: Any) -> Employee:
        values: dict[str, Any] = {
            "id": 1,
            "name": "John Doe",
            "department": "IT",
            "salary": 75_000.0,
            "performance_rating": 4.0,
            "years_of_experience": 5,
            "active": True,
        }
        values.update(overrides)
        return Employee(**values)

    return _make


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def store(observer: RecordingObserver) -> EmployeeStore:
    return EmployeeStore(observer=observer)


@pytest.fixture
def scenario_store(store: EmployeeStore, make_employee: Callable[..., Employee]) -> EmployeeStore:
    """
    Store seeded with:
    (1, "A", "IT", 75000, 4.2, 5), (2, "B", "HR", 65000, 4.5, 3), (3, "C", "IT", 95000, 3.8, 7).
    """
    store.create(make_employee(id=1, name="A", department="IT", salary=75_000.0,
                               performance_rating=4.2, years_of_experience=5))
    store.create(make_employee(id=2, name="B", department="HR", salary=65_000.0,
                               performance_rating=4.5, years_of_experience=3))
    store.create(make_employee(id=3, name="C", department="IT", salary=95_000.0,
                               performance_rating=3.8, years_of_experience=7))
    return store
