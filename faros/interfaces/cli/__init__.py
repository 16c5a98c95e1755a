"""CLI interface for Faros using Typer.

Usage:
    faros list                     # Show tasks due within three days
    faros add task -n "Report"     # Add a top-level task
    faros add subtask Report -n X  # Add a subtask
    faros complete Report          # Check a task off
    faros modify task Report -D 12 # Move its due day
    faros remove task Report       # Remove it and its subtasks

The CLI is structured as:
- app: Main Typer application
- commands/: Individual command groups (add, modify, remove) and the
  top-level list/complete commands
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

from typing import Optional

import typer

from faros import __version__
from faros.global_config import get_config_dir
from faros.interfaces.cli.commands import add, modify, remove, task
from faros.interfaces.cli.common import fail, get_settings
from faros.logging_setup import setup_logging

# Create the main Typer application
app = typer.Typer(
    name="faros",
    help="A simple CLI TODO list manager.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"faros version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Faros - a hierarchical TODO list for the command line.

    Tasks can own subtasks to any depth. The list is kept in
    ~/.config/faros/list.json (or $FAROS_HOME/list.json).
    """
    settings = get_settings()
    try:
        setup_logging(log_dir=get_config_dir(), console_level=settings.log_level)
    except OSError as e:
        fail(f"Logging could not be set up: {e}")


# =============================================================================
# Register Commands
# =============================================================================

app.command("list")(task.list_tasks)
app.command("complete")(task.complete)

app.add_typer(add.app, name="add")
app.add_typer(modify.app, name="modify")
app.add_typer(remove.app, name="remove")


__all__ = ["app"]
