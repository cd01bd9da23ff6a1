"""Command 'today' of todaywidget"""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import typer

from todaywidget.services.config_service import get_config_service
from todaywidget.services.presenter import TaskPresenter
from todaywidget.services.task_store import TaskStore, TaskStoreError
from todaywidget.utils.exit_codes import ERROR_GENERAL, ERROR_INVALID_ARGS
from todaywidget.utils.ui.formatters import format_output

from .decorators import AppError, command_wrapper

app = typer.Typer()


def _parse_now(value: str | None) -> datetime:
    if value is None:
        return datetime.now(UTC)
    try:
        now = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise AppError(f"Invalid --now value '{value}'", ERROR_INVALID_ARGS) from e
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return now


def _parse_tz(value: str) -> ZoneInfo:
    try:
        return ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise AppError(f"Unknown timezone '{value}'", ERROR_INVALID_ARGS) from e


@app.command("today")
@command_wrapper
def today_command(
    store: str | None = typer.Option(None, "--store", "-s", help="Path to the tasks JSON file"),
    now: str | None = typer.Option(
        None, "--now", help="Render as of this ISO-8601 instant instead of the current time"
    ),
    tz: str | None = typer.Option(None, "--tz", help="Display timezone (IANA name)"),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (pretty, json, yaml)"
    ),
) -> None:
    """Show today's tasks as the widget would render them."""
    config_svc = get_config_service()

    instant = _parse_now(now)
    display_tz = _parse_tz(tz) if tz else config_svc.display_timezone()
    output = output or config_svc.config.display.output
    if output not in ("pretty", "json", "yaml"):
        raise AppError(f"Unsupported output format '{output}'", ERROR_INVALID_ARGS)

    task_store = TaskStore(store) if store else config_svc.task_store()
    try:
        tasks = task_store.today_tasks()
    except TaskStoreError as e:
        raise AppError(str(e), ERROR_GENERAL) from e

    view = TaskPresenter(display_tz).today_view(tasks, instant)
    format_output(view, output)
