"""Command 'version' of todaywidget"""

import typer

from todaywidget import __version__
from todaywidget.utils.logger import get_log_path
from todaywidget.utils.ui.console import get_console
from todaywidget.utils.ui.formatters import WIDGET_DESCRIPTION, WIDGET_DISPLAY_NAME

app = typer.Typer()
console = get_console(highlight=False)


@app.command()
def version() -> None:
    """Show version information"""
    console.print(f"{WIDGET_DISPLAY_NAME} widget {__version__}")
    console.print(f"[dim]{WIDGET_DESCRIPTION}[/dim]")
    console.print(f"[dim]Log file: {get_log_path()}[/dim]")
