"""Configuration management commands."""

import json

import typer
from pydantic import BaseModel, ValidationError

from todaywidget.services.config_service import get_config_service
from todaywidget.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from todaywidget.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")


def _parse_value(value: str) -> str | None:
    """Map "none"/"null" to None; pydantic coerces the rest per field type."""
    if value.lower() in ("none", "null"):
        return None
    return value


def _lookup(key: str):
    try:
        value = get_config_service().get(key)
    except ValueError as e:
        raise AppError(str(e), ERROR_NOT_FOUND) from e
    return value.model_dump(mode="json") if isinstance(value, BaseModel) else value


@app.command("show")
@command_wrapper
def show_config() -> None:
    """Show the current configuration."""
    config_svc = get_config_service()
    print(json.dumps(config_svc.config.model_dump(mode="json"), indent=2))


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., display.timezone)"),
) -> None:
    """Print a single configuration value."""
    print(json.dumps(_lookup(key)))


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., display.timezone)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    _lookup(key)
    try:
        get_config_service().set(key, _parse_value(value))
    except ValidationError as e:
        message = e.errors()[0]["msg"]
        raise AppError(f"Invalid value for '{key}': {message}", ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to {json.dumps(_lookup(key))}")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Are you sure you want to reset the configuration?"):
        raise typer.Exit(0)

    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
