from __future__ import annotations

from rich.console import Console

from employee_store import reporter
from employee_store.engines.aggregation import AggregationEngine
from employee_store.sample_data import demo_employees, load


def _console() -> Console:
    return Console(record=True, width=160, color_system=None)


def test_print_employees_renders_rows(store):
    load(store, demo_employees())
    console = _console()

    reporter.print_employees(store.all(), console=console)

    text = console.export_text()
    assert "David Lee" in text
    assert "115,000.00" in text
    assert "Total employees: 10" in text


def test_print_employees_handles_empty_input():
    console = _console()
    reporter.print_employees([], console=console)
    assert "No employees to display." in console.export_text()


def test_report_tables_render(store):
    load(store, demo_employees())
    aggregates = AggregationEngine(store)
    console = _console()

    reporter.print_department_summary(aggregates.department_summary(), console=console)
    reporter.print_salary_distribution(aggregates.salary_distribution(), console=console)
    reporter.print_performance_report(aggregates.performance_bands(), console=console)

    text = console.export_text()
    assert "Department Summary Report" in text
    assert "Finance" in text
    assert "$110,000 and above" in text
    assert "Outstanding" in text
    assert ">= 4.5" in text
    assert "Below Average: < 3.0" in text
