"""Rich output helpers for the Smart ToDo CLI."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from functools import lru_cache

from rich.console import Console
from rich.table import Table

from smart_todo.models.task import Task


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Get a Rich Console instance for consistent output formatting."""
    return Console(highlight=highlight)


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {message}")


def format_info(message: str) -> None:
    get_console().print(f"[dim]{message}[/dim]")


def format_due_date(due: date | None, today: date) -> str:
    """Render a due date, highlighting overdue and today's tasks."""
    if due is None:
        return "-"
    if due < today:
        return f"[red]{due.isoformat()}[/red]"
    if due == today:
        return f"[yellow]{due.isoformat()}[/yellow]"
    return due.isoformat()


def format_tasks_table(tasks: Iterable[Task], today: date | None = None) -> Table:
    """Build a table with one row per task."""
    today = today or date.today()
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Done")
    table.add_column("Name", style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Priority", justify="right")
    table.add_column("Due")
    table.add_column("Description", overflow="fold")

    for index, task in enumerate(tasks, start=1):
        table.add_row(
            str(index),
            "✓" if task.completed else "✗",
            task.name,
            task.category or "-",
            str(task.priority) if task.priority is not None else "-",
            format_due_date(task.due_date, today),
            task.description or "-",
        )
    return table
