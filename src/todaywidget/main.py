"""Main entry point for the today widget CLI."""

import typer

from todaywidget.commands import config_command, today_command, version_command
from todaywidget.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="todaywidget",
    cls=SuggestingGroup,
    help="Today's tasks, rendered the way the home-screen widget shows them",
    no_args_is_help=True,
)

# Top-level commands
app.command("today")(today_command.today_command)
app.command("version")(version_command.version)

# Subcommands
app.add_typer(config_command.app, name="config", help="Configuration management")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
