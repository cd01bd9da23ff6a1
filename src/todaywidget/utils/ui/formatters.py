"""Output formatters for different formats."""

import json

import yaml
from rich.text import Text

from todaywidget.models.task import Shown, TaskViewModel, TodayView
from todaywidget.utils.ui.console import get_console

console = get_console()

# Non-task colors of the widget
SECONDARY_TEXT_COLOR = "#98989F"
SEPARATOR_DOT_COLOR = "#CFCFD1"
WIDGET_DISPLAY_NAME = "Tasks"
WIDGET_DESCRIPTION = "Displays Workspace tasks"

BULLET = "◯"
SEPARATOR_DOT = "•"


def format_output(view: TodayView, output_format: str = "pretty") -> None:
    """Format and display the today view based on format."""
    if output_format == "json":
        print(json.dumps(view.model_dump(mode="json"), indent=2))
    elif output_format == "yaml":
        print(yaml.dump(view.model_dump(mode="json"), default_flow_style=False, sort_keys=False))
    else:
        format_today_pretty(view)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


# ============================================================================
# Pretty Format Implementation
# ============================================================================


def get_progress_bar(fraction: float) -> str:
    """Get a ten-cell progress bar for a 0-1 fraction."""
    filled = int(round(fraction * 10))
    return "▓" * filled + "░" * (10 - filled)


def format_header(view: TodayView) -> Text:
    """Header line: title, progress bar and completed/total."""
    header = Text()
    header.append(f"{get_progress_bar(view.progress)} ", style="white")
    header.append(view.title, style="bold white")
    header.append(f"  {view.completed}/{view.total}", style="dim")
    return header


def format_task_row(row: TaskViewModel) -> Text:
    """One task row: colored bullet, title, then time and description."""
    line = Text()
    line.append(f"{BULLET} ", style=f"bold {row.priority_color.value}")
    line.append(row.title, style="white")

    details = Text("  ")
    if isinstance(row.due_time, Shown):
        # The parse-failure sentinel stays visible but is marked
        time_style = "bold red" if row.due_time.parse_failed else SECONDARY_TEXT_COLOR
        details.append(row.due_time.label, style=time_style)
        details.append(f" {SEPARATOR_DOT} ", style=SEPARATOR_DOT_COLOR)
    details.append(row.description, style=SECONDARY_TEXT_COLOR)

    line.append_text(details)
    line.no_wrap = True
    line.overflow = "ellipsis"
    return line


def format_today_pretty(view: TodayView) -> None:
    """Format the today view with colors."""
    console.print(format_header(view))
    console.print()

    if not view.rows:
        console.print("[green]No tasks for today! 🎉[/green]")
        return

    for row in view.rows:
        console.print(format_task_row(row))

