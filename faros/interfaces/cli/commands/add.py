"""Commands that add tasks, subtasks and tags."""

from datetime import datetime

import typer

from faros.application import add_subtask, add_tag, add_task, build_due_date
from faros.domain.shared import Err
from faros.domain.task import Priority
from faros.interfaces.cli.common import (
    fail,
    load_task_list,
    log_event,
    print_success,
    prompt_if_missing,
    prompt_selection,
    save_task_list,
)

app = typer.Typer(help="Adds something to your TODO list.", no_args_is_help=True)


def _due_date(
    year: int | None,
    month: int | None,
    day: int | None,
    hour: int | None,
    minute: int | None,
) -> datetime:
    due = build_due_date(year, month, day, hour, minute)
    if isinstance(due, Err):
        fail(due.error)
    return due.value


@app.command("task")
def task(
    name: str | None = typer.Option(None, "--name", "-n", help="Name of the task."),
    description: str | None = typer.Option(
        None, "--desc", "-d", help="Description of the task."
    ),
    year: int | None = typer.Option(None, "--year", "-Y", help="Year the task is due."),
    month: int | None = typer.Option(None, "--month", "-M", help="Month the task is due."),
    day: int | None = typer.Option(None, "--day", "-D", help="Day the task is due."),
    hour: int | None = typer.Option(None, "--hour", "-h", help="Hour the task is due."),
    minute: int | None = typer.Option(
        None, "--minute", "-m", help="Minutes after the hour the task is due."
    ),
    priority: Priority = typer.Option(
        Priority.MEDIUM, "--priority", "-p", case_sensitive=False, help="Task priority."
    ),
) -> None:
    """Adds a task to your TODO list.

    The due date defaults to today at 23:59; any date or time component
    given replaces the matching part of that default.
    """
    due_date = _due_date(year, month, day, hour, minute)
    repo, task_list = load_task_list()

    name = prompt_if_missing(name, "Please give your new task a name")
    description = prompt_if_missing(description, "Please give your new task a description")

    result = add_task(task_list, name, description, priority, due_date)
    if isinstance(result, Err):
        fail(result.error)

    task_list, event = result.value
    log_event(event)
    save_task_list(repo, task_list)
    print_success(f"Added task: {event.task_name}")


@app.command("subtask")
def subtask(
    parent_name: str = typer.Argument(..., help="Name of the parent task."),
    name: str | None = typer.Option(None, "--name", "-n", help="Name of the subtask."),
    description: str | None = typer.Option(
        None, "--desc", "-d", help="Description of the subtask."
    ),
    year: int | None = typer.Option(None, "--year", "-Y", help="Year the subtask is due."),
    month: int | None = typer.Option(None, "--month", "-M", help="Month the subtask is due."),
    day: int | None = typer.Option(None, "--day", "-D", help="Day the subtask is due."),
    hour: int | None = typer.Option(None, "--hour", "-h", help="Hour the subtask is due."),
    minute: int | None = typer.Option(
        None, "--minute", "-m", help="Minutes after the hour the subtask is due."
    ),
    priority: Priority = typer.Option(
        Priority.MEDIUM, "--priority", "-p", case_sensitive=False, help="Subtask priority."
    ),
) -> None:
    """Adds a subtask of an existing task to your TODO list.

    Adding a subtask to a completed task marks that task incomplete again.
    """
    due_date = _due_date(year, month, day, hour, minute)
    repo, task_list = load_task_list()

    name = prompt_if_missing(name, "Please give your new task a name")
    description = prompt_if_missing(description, "Please give your new task a description")

    result = add_subtask(
        task_list,
        parent_name,
        name,
        description,
        priority,
        due_date,
        select=prompt_selection,
    )
    if isinstance(result, Err):
        fail(result.error)

    task_list, event = result.value
    log_event(event)
    save_task_list(repo, task_list)
    print_success(f"Added subtask: {event.task_name} (under {parent_name})")
    if event.reopened_parent:
        print_success(f"The task named {parent_name} is incomplete again.")


@app.command("tag")
def tag(
    name: str | None = typer.Option(None, "--name", "-n", help="The tag's name."),
    description: str | None = typer.Option(
        None, "--desc", "-d", help="The tag's description."
    ),
) -> None:
    """Adds a tag to your TODO list."""
    repo, task_list = load_task_list()

    name = prompt_if_missing(name, "Please give your new tag a name")
    description = prompt_if_missing(description, "Please give your new tag a description")

    result = add_tag(task_list, name, description)
    if isinstance(result, Err):
        fail(result.error)

    task_list, event = result.value
    log_event(event)
    save_task_list(repo, task_list)
    print_success(f"Added tag: {event.tag_name}")
