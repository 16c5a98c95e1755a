"""Shared utilities for Faros CLI commands.

This module provides common utilities used across CLI commands:
- Loading and saving the task list around a command
- Formatted output helpers (error, success, info)
- Task formatting for display
- Interactive prompts (missing fields, disambiguation)
- Error reporting that decides exit codes
"""

import logging
from collections.abc import Sequence
from typing import NoReturn

import typer

from faros.domain.shared import Err, FarosError
from faros.domain.task import DomainEvent, TaskList, TaskNode
from faros.global_config import FarosConfig, get_global_config, get_list_path
from faros.infrastructure.storage import TaskListRepository

logger = logging.getLogger(__name__)


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message.

    Args:
        msg: Success message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message.

    Args:
        msg: Info message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_warning(msg: str) -> None:
    """Print a formatted warning message.

    Args:
        msg: Warning message to display
    """
    typer.echo(typer.style(f"Warning: {msg}", fg=typer.colors.YELLOW), err=True)


def fail(error: FarosError | str) -> NoReturn:
    """Report an error and stop the command without saving anything."""
    print_error(str(error))
    logger.info(f"Aborted: {error}")
    raise typer.Exit(1)


def get_settings() -> FarosConfig:
    """Get the user's preferences, stopping the command if unreadable."""
    try:
        return get_global_config()
    except OSError as e:
        fail(f"The faros config directory could not be created: {e}")


def load_task_list() -> tuple[TaskListRepository, TaskList]:
    """Load the task list, stopping the command on any persistence error.

    Returns:
        The repository (for saving later) and the loaded task list.
    """
    try:
        path = get_list_path()
    except OSError as e:
        fail(f"The faros config directory could not be created: {e}")

    repo = TaskListRepository(path)
    result = repo.load()
    if isinstance(result, Err):
        fail(result.error)
    return repo, result.value


def save_task_list(repo: TaskListRepository, task_list: TaskList) -> None:
    """Write the task list back, stopping the command on failure."""
    result = repo.save(task_list)
    if isinstance(result, Err):
        fail(result.error)


def log_event(event: DomainEvent) -> None:
    """Record a domain event in the log."""
    logger.info(f"{type(event).__name__}: {event.model_dump_json(exclude={'event_id'})}")


def format_task(task: TaskNode) -> str:
    """Format a task for display."""
    marker = "[x]" if task.is_complete else "[ ]"
    due = task.due_date.strftime("%Y-%m-%d %H:%M %z")
    return (
        f"{marker} Name: {task.name}\n"
        f"\tDescription: {task.description}\n"
        f"\tPriority: {task.priority.value}\n"
        f"\tDue Date: {due}\n"
        f"\t{task.uuid}"
    )


def prompt_if_missing(value: str | None, prompt: str) -> str:
    """Return ``value``, asking the user for it when not given."""
    if value is not None:
        return value
    return typer.prompt(prompt, default="", show_default=False).strip()


def prompt_selection(candidates: Sequence[TaskNode]) -> str:
    """Ask the user to pick one of several tasks sharing a name.

    Returns the raw reply; validation happens in the domain layer.
    """
    typer.echo(
        f"There is more than one task in your TODO list named {candidates[0].name}. "
        "Select one."
    )
    for index, task in enumerate(candidates):
        typer.echo(f"{index}: {format_task(task)}")
    return typer.prompt("Index", default="", show_default=False)


__all__ = [
    "print_error",
    "print_success",
    "print_info",
    "print_warning",
    "fail",
    "get_settings",
    "load_task_list",
    "save_task_list",
    "log_event",
    "format_task",
    "prompt_if_missing",
    "prompt_selection",
]
