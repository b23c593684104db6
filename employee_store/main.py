from __future__ import annotations

import sys
from typing import Optional

import typer
from rich.console import Console

from employee_store import reporter, sample_data
from employee_store.config import Settings, get_settings
from employee_store.domain.errors import EmployeeStoreError
from employee_store.engines import AggregationEngine, OrderingEngine
from employee_store.store import EmployeeStore
from employee_store.utils.logging import configure_logging

app = typer.Typer(help="Employee store CLI.")


def _setup() -> Settings:
    settings = get_settings()
    configure_logging(
        level=settings.log_level, json_logs=settings.log_json, log_file=settings.log_file
    )
    return settings


def _fail(exc: EmployeeStoreError) -> None:
    typer.echo(f"{exc.kind}: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"departments={','.join(settings.valid_departments)} | "
        f"top_k={settings.default_top_k} env={settings.app_env} "
        f"log_level={settings.log_level}"
    )


@app.command()
def demo(
    generate: Optional[int] = typer.Option(
        None,
        "--generate",
        "-g",
        min=0,
        help="Load N generated employees instead of the sample roster.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed for --generate.",
    ),
) -> None:
    """
    Load a roster and print the employee, department, salary and performance reports.
    """
    settings = _setup()
    console = Console()
    store = EmployeeStore.from_settings(settings)
    try:
        if generate is not None:
            employees = sample_data.generate_employees(
                generate, seed=seed, departments=settings.valid_departments
            )
        else:
            employees = sample_data.demo_employees()
        sample_data.load(store, employees)
    except EmployeeStoreError as exc:
        _fail(exc)

    aggregates = AggregationEngine(store)
    reporter.print_employees(store.all(), console=console)
    reporter.print_department_summary(aggregates.department_summary(), console=console)
    reporter.print_salary_distribution(aggregates.salary_distribution(), console=console)
    reporter.print_performance_report(aggregates.performance_bands(), console=console)


@app.command()
def top(
    n: Optional[int] = typer.Option(
        None,
        "--n",
        "-n",
        help="Number of employees to show (default from settings).",
    ),
) -> None:
    """
    Print the highest-paid employees of the sample roster.
    """
    settings = _setup()
    try:
        store = sample_data.load(EmployeeStore.from_settings(settings))
        employees = OrderingEngine(store, default_top_k=settings.default_top_k).top_paid(n)
    except EmployeeStoreError as exc:
        _fail(exc)
    reporter.print_employees(employees, title="Top Paid Employees", console=Console())


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
