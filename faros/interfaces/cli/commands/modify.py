"""Commands that modify tasks and tags."""

import typer

from faros.application import modify_task
from faros.domain.shared import Err
from faros.domain.task import Priority
from faros.interfaces.cli.common import (
    fail,
    load_task_list,
    log_event,
    print_info,
    print_success,
    print_warning,
    prompt_selection,
    save_task_list,
)

app = typer.Typer(help="Modifies something in your TODO list.", no_args_is_help=True)


@app.command("task")
def task(
    task_name: str = typer.Argument(..., help="Name of the task to modify."),
    name: str | None = typer.Option(None, "--name", "-n", help="New name of the task."),
    description: str | None = typer.Option(
        None, "--desc", "-d", help="New description of the task."
    ),
    year: int | None = typer.Option(None, "--year", "-Y", help="Year the task is due."),
    month: int | None = typer.Option(None, "--month", "-M", help="Month the task is due."),
    day: int | None = typer.Option(None, "--day", "-D", help="Day the task is due."),
    hour: int | None = typer.Option(None, "--hour", "-h", help="Hour the task is due."),
    minute: int | None = typer.Option(
        None, "--minute", "-m", help="Minutes after the hour the task is due."
    ),
    priority: Priority | None = typer.Option(
        None, "--priority", "-p", case_sensitive=False, help="New task priority."
    ),
) -> None:
    """Modifies a task in your TODO list.

    Only the options given are changed. Date and time options replace the
    matching part of the current due date.
    """
    repo, task_list = load_task_list()

    result = modify_task(
        task_list,
        task_name,
        select=prompt_selection,
        name=name,
        description=description,
        priority=priority,
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
    )
    if isinstance(result, Err):
        fail(result.error)

    task_list, event = result.value
    if not event.changed:
        print_info(f"Nothing to change for {task_name}.")
        return

    log_event(event)
    save_task_list(repo, task_list)
    print_success(f"Modified {event.task_name}: {', '.join(event.changed)}")


@app.command("tag")
def tag(
    tag_name: str = typer.Argument(..., help="Name of the tag to modify."),
    name: str | None = typer.Option(None, "--name", "-n", help="New name of the tag."),
    description: str | None = typer.Option(
        None, "--desc", "-d", help="New description of the tag."
    ),
) -> None:
    """Modifies a tag in your TODO list (not supported yet)."""
    print_warning(f"Tag management is not supported yet; {tag_name} was left unchanged.")
