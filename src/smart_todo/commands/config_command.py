"""Config command - read and change settings."""

import typer
from pydantic import ValidationError

from smart_todo.services.config_service import get_config_service
from smart_todo.utils.exit_codes import ERROR_INVALID_ARGS
from smart_todo.utils.ui.formatters import format_success, get_console

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management")


@app.command("show")
@command_wrapper
def show_config() -> None:
    """Show the whole configuration."""
    get_console().print_json(get_config_service().config.model_dump_json())


@app.command("get")
@command_wrapper
def get_config(key: str = typer.Argument(..., help="Dotted key, e.g. ui.theme")) -> None:
    """Show one configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError:
        raise AppError(f"Unknown config key '{key}'", ERROR_INVALID_ARGS) from None
    get_console().print(f"{key} = {value}")


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Dotted key, e.g. ui.theme"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Change one configuration value."""
    try:
        get_config_service().set(key, value)
    except KeyError:
        raise AppError(f"Unknown config key '{key}'", ERROR_INVALID_ARGS) from None
    except ValidationError as e:
        message = "; ".join(err["msg"] for err in e.errors())
        raise AppError(f"Invalid value for {key}: {message}", ERROR_INVALID_ARGS) from None
    format_success(f"{key} = {value}")


@app.command("reset")
@command_wrapper
def reset_config(
    key: str | None = typer.Argument(None, help="Key to reset (default: everything)"),
) -> None:
    """Reset configuration to defaults."""
    try:
        get_config_service().reset(key)
    except KeyError:
        raise AppError(f"Unknown config key '{key}'", ERROR_INVALID_ARGS) from None
    format_success(f"Reset {key or 'configuration'} to defaults")
