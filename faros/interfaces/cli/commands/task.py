"""Top-level task commands: list and complete."""

import typer

from faros.application import complete_task
from faros.domain.shared import Err
from faros.domain.task import ListFilter, count_tasks, select_tasks
from faros.interfaces.cli.common import (
    fail,
    format_task,
    get_settings,
    load_task_list,
    log_event,
    print_error,
    print_info,
    print_success,
    prompt_selection,
    save_task_list,
)


def list_tasks(
    days: int | None = typer.Option(
        None,
        "--days",
        "-d",
        help="Lists only tasks that are due within the specified number of days.",
    ),
    number: int | None = typer.Option(
        None,
        "--number",
        "-n",
        min=0,
        help="Lists a maximum of the specified number of tasks.",
    ),
    high: bool = typer.Option(False, "--high", "-H", help="Lists high priority tasks."),
    medium: bool = typer.Option(False, "--medium", "-M", help="Lists medium priority tasks."),
    low: bool = typer.Option(False, "--low", "-L", help="Lists low priority tasks."),
    pending: bool = typer.Option(False, "--pending", help="Hides completed tasks."),
) -> None:
    """Lists tasks from your TODO list.

    Tasks are sorted by due date. Overdue tasks are always shown. With no
    priority flag, every priority is shown.
    """
    settings = get_settings()
    _, task_list = load_task_list()

    list_filter = ListFilter(
        high=high,
        medium=medium,
        low=low,
        max_days=settings.default_days if days is None else days,
        max_count=number,
        include_complete=not pending,
    )
    tasks = select_tasks(task_list, list_filter)

    if not tasks:
        typer.echo("No tasks to show.")
        return

    for task in tasks:
        typer.echo(format_task(task))

    done, total = count_tasks(task_list)
    typer.echo(f"\nShowing {len(tasks)} of {total} task(s), {done} complete.")


def complete(
    task_names: list[str] = typer.Argument(..., help="Names of the tasks to complete."),
) -> None:
    """Checks tasks off as complete.

    A task can only be completed once all of its subtasks are complete.
    """
    settings = get_settings()
    repo, task_list = load_task_list()

    missing = False
    for name in task_names:
        result = complete_task(
            task_list,
            name,
            select=prompt_selection,
            preserve_children=settings.preserve_completed_children,
        )
        if isinstance(result, Err):
            if result.error.fatal:
                fail(result.error)
            print_error(str(result.error))
            missing = True
            continue

        task_list, event = result.value
        log_event(event)
        if event.already_complete:
            print_info(f"The task named {event.task_name} is already marked as complete.")
        else:
            print_success(f"Completed: {event.task_name}")

    save_task_list(repo, task_list)
    if missing:
        raise typer.Exit(1)
