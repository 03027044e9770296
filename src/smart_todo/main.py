"""Main entry point for Smart ToDo."""

from pathlib import Path

import typer

from smart_todo import __version__
from smart_todo.commands import config_command, tasks_command
from smart_todo.services.config_service import get_config_service
from smart_todo.utils.logger import set_level
from smart_todo.utils.ui.formatters import get_console

app = typer.Typer(
    name="smart-todo",
    help="Smart ToDo - a task list with live filtering and search",
    invoke_without_command=True,
)

app.add_typer(config_command.app, name="config", help="Configuration management")
app.command("list")(tasks_command.list_tasks)
app.command("clear-completed")(tasks_command.clear_completed)
app.command("clear-overdue")(tasks_command.clear_overdue)


@app.callback()
def main(
    ctx: typer.Context,
    data_file: Path | None = typer.Option(
        None, "--data-file", help="Task file to use instead of the configured one"
    ),
) -> None:
    """Open the task view when no command is given."""
    ctx.obj = {"data_file": data_file}
    config = get_config_service().config
    set_level(config.logging.level)

    if ctx.invoked_subcommand is None:
        from smart_todo.ui.main_view import run_app

        store = tasks_command.get_task_store(ctx)
        run_app(store=store, config=config)


@app.command()
def version() -> None:
    """Show version information."""
    get_console().print(f"[bold]Smart ToDo[/bold] version [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
