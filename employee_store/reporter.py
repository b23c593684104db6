from __future__ import annotations

from typing import Iterable, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from employee_store.domain.models import (
    DepartmentSummary,
    Employee,
    PerformanceBand,
    SalaryBracket,
)


def _console(console: Optional[Console]) -> Console:
    return console if console is not None else Console()


def _band_range(lower: float, upper: Optional[float]) -> str:
    if upper is None:
        return f">= {lower:.1f}"
    if lower <= 0:
        return f"< {upper:.1f}"
    return f"{lower:.1f} - {upper - 0.1:.1f}"


def print_employees(
    employees: Sequence[Employee],
    title: str = "Employees",
    console: Optional[Console] = None,
) -> None:
    """
    Render employee records as a rich table, in the order given.
    """
    console = _console(console)

    if not employees:
        console.print("[yellow]No employees to display.[/yellow]")
        return

    table = Table(title=title, box=box.ROUNDED, caption=f"Total employees: {len(employees)}")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Department", style="magenta")
    table.add_column("Salary ($)", justify="right", style="green")
    table.add_column("Rating", justify="right", style="yellow")
    table.add_column("Exp (Yrs)", justify="right", style="blue")
    table.add_column("Active", justify="center")

    for emp in employees:
        table.add_row(
            str(emp.id),
            emp.name,
            emp.department,
            f"{emp.salary:,.2f}",
            f"{emp.performance_rating:.1f}",
            str(emp.years_of_experience),
            "Yes" if emp.active else "[red]No[/red]",
        )

    console.print(table)


def print_department_summary(
    summaries: Iterable[DepartmentSummary], console: Optional[Console] = None
) -> None:
    console = _console(console)
    table = Table(title="Department Summary Report", box=box.ROUNDED)
    table.add_column("Department", style="cyan", no_wrap=True)
    table.add_column("Emp Count", justify="right", style="magenta")
    table.add_column("Avg Salary ($)", justify="right", style="bold green")
    table.add_column("Avg Experience", justify="right", style="blue")
    table.add_column("Avg Performance", justify="right", style="yellow")

    for summary in summaries:
        table.add_row(
            summary.department,
            str(summary.headcount),
            f"{summary.average_salary:,.2f}",
            f"{summary.average_experience:.1f}",
            f"{summary.average_rating:.1f}",
        )

    console.print(table)


def print_salary_distribution(
    brackets: Iterable[SalaryBracket], console: Optional[Console] = None
) -> None:
    console = _console(console)
    table = Table(title="Salary Distribution Report", box=box.ROUNDED)
    table.add_column("Salary Range", style="cyan", no_wrap=True)
    table.add_column("Count", justify="right", style="magenta")

    for bracket in brackets:
        table.add_row(bracket.label, str(bracket.headcount))

    console.print(table)


def print_performance_report(
    bands: Iterable[PerformanceBand], console: Optional[Console] = None
) -> None:
    """
    Render performance bands followed by a legend of their rating ranges.
    """
    console = _console(console)
    bands = list(bands)

    table = Table(title="Performance Rating Report", box=box.ROUNDED)
    table.add_column("Performance", style="cyan", no_wrap=True)
    table.add_column("Count", justify="right", style="magenta")
    table.add_column("Avg Salary ($)", justify="right", style="bold green")

    for band in bands:
        table.add_row(band.label, str(band.headcount), f"{band.average_salary:,.2f}")

    console.print(table)
    console.print("[dim]Performance Rating Ranges:[/dim]")
    for band in bands:
        console.print(f"[dim]- {band.label}: {_band_range(band.lower, band.upper)}[/dim]")


__all__ = [
    "print_employees",
    "print_department_summary",
    "print_salary_distribution",
    "print_performance_report",
]
