"""CLI command groups for Faros.

This package contains the command modules registered with the main
Typer app.

Command groups:
- add: Add a task, subtask or tag
- modify: Modify a task or tag
- remove: Remove tasks or tags
- task: Top-level list and complete commands
"""

from faros.interfaces.cli.commands import add, modify, remove, task

__all__ = ["add", "modify", "remove", "task"]
