"""Commands that remove tasks and tags."""

import typer

from faros.application import remove_task
from faros.domain.shared import Err
from faros.interfaces.cli.common import (
    fail,
    get_settings,
    load_task_list,
    log_event,
    print_error,
    print_success,
    print_warning,
    prompt_selection,
    save_task_list,
)

app = typer.Typer(help="Removes something from your TODO list.", no_args_is_help=True)


@app.command("task")
def task(
    task_names: list[str] = typer.Argument(..., help="Names of the tasks to remove."),
) -> None:
    """Removes tasks, with all of their subtasks, from your TODO list."""
    settings = get_settings()
    repo, task_list = load_task_list()

    missing = False
    for name in task_names:
        result = remove_task(
            task_list,
            name,
            select=prompt_selection,
            depth=settings.removal_depth,
        )
        if isinstance(result, Err):
            if result.error.fatal:
                fail(result.error)
            print_error(str(result.error))
            missing = True
            continue

        task_list, event = result.value
        log_event(event)
        print_success(f"Removed: {event.task_name}")

    save_task_list(repo, task_list)
    if missing:
        raise typer.Exit(1)


@app.command("tag")
def tag(
    tag_names: list[str] = typer.Argument(..., help="Names of the tags to remove."),
) -> None:
    """Removes tags from your TODO list (not supported yet)."""
    print_warning(
        f"Tag management is not supported yet; {', '.join(tag_names)} left unchanged."
    )
