from __future__ import annotations

import pytest

from employee_store.domain.errors import InvalidInputError
from employee_store.engines.ordering import Ordering, OrderingEngine
from employee_store.sample_data import generate_employees, load

DEFAULT_TOP_K = 5
ROSTER_SIZE = 40


def _ids(employees):
    return [emp.id for emp in employees]


@pytest.fixture
def tied_store(store, make_employee):
    # Inserted out of key order so ties can only be resolved by the key.
    store.create(make_employee(id=4, salary=80_000.0, performance_rating=4.0, years_of_experience=3))
    store.create(make_employee(id=2, salary=80_000.0, performance_rating=4.0, years_of_experience=3))
    store.create(make_employee(id=9, salary=99_000.0, performance_rating=3.0, years_of_experience=10))
    store.create(make_employee(id=1, salary=50_000.0, performance_rating=4.9, years_of_experience=1))
    return store


def test_sorted_by_salary_breaks_ties_by_key(tied_store):
    assert _ids(OrderingEngine(tied_store).sorted_by_salary()) == [9, 2, 4, 1]


def test_sorted_by_performance_breaks_ties_by_key(tied_store):
    assert _ids(OrderingEngine(tied_store).sorted_by_performance()) == [1, 2, 4, 9]


def test_sorted_by_experience_breaks_ties_by_key(tied_store):
    assert _ids(OrderingEngine(tied_store).sorted_by_experience()) == [9, 2, 4, 1]


def test_sorted_by_accepts_names(tied_store):
    ordering = OrderingEngine(tied_store)
    assert ordering.sorted_by("salary") == ordering.sorted_by(Ordering.SALARY)
    with pytest.raises(InvalidInputError):
        ordering.sorted_by("name")


def test_salary_order_is_non_increasing(store):
    load(store, generate_employees(ROSTER_SIZE, seed=7))

    salaries = [emp.salary for emp in OrderingEngine(store).sorted_by_salary()]

    assert salaries == sorted(salaries, reverse=True)


def test_top_paid_scenario(scenario_store):
    assert _ids(OrderingEngine(scenario_store).top_paid(2)) == [3, 1]


@pytest.mark.parametrize("n", [1, 3, 5, ROSTER_SIZE, ROSTER_SIZE + 10])
def test_top_paid_is_a_bounded_prefix_of_salary_order(store, n):
    load(store, generate_employees(ROSTER_SIZE, seed=11))
    ordering = OrderingEngine(store)

    top = ordering.top_paid(n)

    assert len(top) == min(n, ROSTER_SIZE)
    assert top == ordering.sorted_by_salary()[: len(top)]


def test_top_paid_defaults_to_five(store):
    load(store, generate_employees(ROSTER_SIZE, seed=3))
    assert len(OrderingEngine(store).top_paid()) == DEFAULT_TOP_K


def test_top_paid_uses_configured_default(scenario_store):
    assert len(OrderingEngine(scenario_store, default_top_k=1).top_paid()) == 1


@pytest.mark.parametrize("n", [0, -3, 2.5])
def test_top_paid_rejects_non_positive_counts(scenario_store, n):
    with pytest.raises(InvalidInputError):
        OrderingEngine(scenario_store).top_paid(n)


def test_top_paid_on_empty_store(store):
    assert OrderingEngine(store).top_paid(3) == []
