"""Application service layer for Faros.

This package contains application services that orchestrate domain
operations. Services are pure functions that combine domain logic without
performing I/O; the CLI loads the task list, calls one service and saves
the result.

Services:
    task_service - add, add subtask, complete, modify, remove
    tag_service - add tag

Example usage:
    >>> from faros.application import add_task, complete_task
    >>> from faros.domain.shared import Ok
    >>> from faros.domain.task import TaskList
    >>>
    >>> task_list, added = add_task(TaskList(), "Write report").value
    >>> result = complete_task(task_list, "Write report")
    >>> isinstance(result, Ok)
    True
"""

from faros.application.tag_service import add_tag
from faros.application.task_service import (
    add_subtask,
    add_task,
    build_due_date,
    complete_task,
    modify_task,
    remove_task,
)

__all__ = [
    # Task service
    "add_task",
    "add_subtask",
    "build_due_date",
    "complete_task",
    "modify_task",
    "remove_task",
    # Tag service
    "add_tag",
]
