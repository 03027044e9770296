"""Task commands - list with filters, clear completed or overdue tasks."""

from datetime import date
from pathlib import Path

import typer

from smart_todo.core.controller import MainViewController
from smart_todo.core.filter_engine import filter_tasks
from smart_todo.models.filters import (
    ALL_CATEGORIES,
    ALL_PRIORITIES,
    ALL_TASKS,
    COMPLETED,
    NOT_COMPLETED,
    FilterState,
)
from smart_todo.services.config_service import get_config_service
from smart_todo.storage.task_store import TaskStore
from smart_todo.utils.exit_codes import ERROR_INVALID_ARGS
from smart_todo.utils.ui.formatters import (
    format_info,
    format_success,
    format_tasks_table,
    get_console,
)

from .decorators import AppError, command_wrapper

STATUS_CHOICES = {
    "all": ALL_TASKS,
    "completed": COMPLETED,
    "done": COMPLETED,
    "open": NOT_COMPLETED,
    "active": NOT_COMPLETED,
}


def get_task_store(ctx: typer.Context) -> TaskStore:
    """Return the store for ``--data-file``, or the configured task file."""
    data_file: Path | None = (ctx.obj or {}).get("data_file")
    if data_file is not None:
        return TaskStore(data_file)
    return TaskStore(get_config_service().task_file())


def parse_status(status: str) -> str:
    try:
        return STATUS_CHOICES[status.lower()]
    except KeyError:
        raise AppError(
            f"Invalid status '{status}'. Use one of: {', '.join(STATUS_CHOICES)}",
            exit_code=ERROR_INVALID_ARGS,
        ) from None


def parse_due(due: str | None) -> date | None:
    if due is None:
        return None
    try:
        return date.fromisoformat(due)
    except ValueError:
        raise AppError(
            f"Invalid date '{due}'. Use YYYY-MM-DD.", exit_code=ERROR_INVALID_ARGS
        ) from None


@command_wrapper
def list_tasks(
    ctx: typer.Context,
    category: str | None = typer.Option(
        None, "--category", "-c", help="Only tasks in this category (any case)"
    ),
    priority: int | None = typer.Option(None, "--priority", "-p", help="Only this priority"),
    status: str = typer.Option("all", "--status", help="all, completed or open"),
    due: str | None = typer.Option(None, "--due", help="Only tasks due on YYYY-MM-DD"),
    search: str | None = typer.Option(None, "--search", "-s", help="Search text"),
    json_opt: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List tasks matching every given filter."""
    state = FilterState(
        category=category or ALL_CATEGORIES,
        priority=str(priority) if priority is not None else ALL_PRIORITIES,
        completion=parse_status(status),
        due_date=parse_due(due),
        keyword=search,
    )
    store = get_task_store(ctx)
    tasks = filter_tasks(store.load(), state)

    if json_opt:
        get_console().print_json(data=[task.model_dump(mode="json") for task in tasks])
        return

    if not tasks:
        format_info("No tasks match.")
        return
    get_console().print(format_tasks_table(tasks))


@command_wrapper
def clear_completed(ctx: typer.Context) -> None:
    """Delete every completed task."""
    controller = MainViewController(get_task_store(ctx))
    before = len(controller.tasks)
    if controller.clear_completed():
        format_success(f"Removed {before - len(controller.tasks)} completed task(s).")
    else:
        format_info("No completed tasks.")


@command_wrapper
def clear_overdue(ctx: typer.Context) -> None:
    """Delete every task whose due date has passed."""
    controller = MainViewController(get_task_store(ctx))
    before = len(controller.tasks)
    if controller.clear_overdue():
        format_success(f"Removed {before - len(controller.tasks)} overdue task(s).")
    else:
        format_info("No overdue tasks.")
