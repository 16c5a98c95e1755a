"""Task application service.

Orchestrates one top-level task operation per function by combining
domain functions. All functions are pure - no I/O, no side effects.
Each returns the updated task list together with the domain event that
describes the change, or the error that prevented it.
"""

from datetime import datetime
from uuid import UUID

from faros.domain.shared import (
    BlockedByIncompleteChildren,
    Err,
    InvalidInput,
    NotFound,
    Ok,
    Result,
)
from faros.domain.task import (
    Priority,
    RemovalDepth,
    Selector,
    TaskAdded,
    TaskCompleted,
    TaskList,
    TaskModified,
    TaskNode,
    TaskRemoved,
    complete,
    default_due_date,
    find_by_uuid,
    remove_by_uuid,
    reopen_with_child,
    resolve_by_identity,
    resolve_by_name,
    update_by_uuid,
)


def build_due_date(
    year: int | None = None,
    month: int | None = None,
    day: int | None = None,
    hour: int | None = None,
    minute: int | None = None,
    base: datetime | None = None,
) -> Result[datetime, InvalidInput]:
    """Build a local due date by substituting the supplied components.

    Components that are not supplied are taken from ``base`` (by default
    today at 23:59) as seen on the local wall clock. Seconds are zeroed
    and the local UTC offset is recomputed for the resulting date.

    Args:
        year, month, day, hour, minute: Optional replacement components.
        base: Due date to start from.

    Returns:
        Ok(aware datetime), or Err(InvalidInput) for an impossible date
        such as 31 February or hour 24.
    """
    wall_clock = (base or default_due_date()).astimezone().replace(tzinfo=None)
    components = {
        "year": year,
        "month": month,
        "day": day,
        "hour": hour,
        "minute": minute,
    }
    supplied = {key: value for key, value in components.items() if value is not None}
    try:
        due = wall_clock.replace(**supplied, second=0, microsecond=0).astimezone()
    except (ValueError, OverflowError) as e:
        described = ", ".join(f"{key}={value}" for key, value in supplied.items())
        return Err(InvalidInput(f"Invalid due date ({described}): {e}"))
    return Ok(due)


def add_task(
    task_list: TaskList,
    name: str,
    description: str = "",
    priority: Priority = Priority.MEDIUM,
    due_date: datetime | None = None,
) -> Result[tuple[TaskList, TaskAdded], InvalidInput]:
    """Append a new top-level task.

    Args:
        task_list: The list to add to.
        name: Task name, need not be unique.
        description: Free-text description.
        priority: Task priority.
        due_date: Aware due date, defaults to today at 23:59.

    Returns:
        Ok((updated_list, TaskAdded)), or Err(InvalidInput) for a naive
        due date.
    """
    if due_date is not None and due_date.tzinfo is None:
        return Err(InvalidInput("The due date must carry a UTC offset."))

    task = TaskNode(
        name=name,
        description=description,
        priority=priority,
        due_date=due_date or default_due_date(),
    )
    updated = task_list.model_copy(update={"tasks": [*task_list.tasks, task]})
    return Ok((updated, TaskAdded(task_uuid=task.uuid, task_name=task.name)))


def add_subtask(
    task_list: TaskList,
    parent_name: str,
    name: str,
    description: str = "",
    priority: Priority = Priority.MEDIUM,
    due_date: datetime | None = None,
    select: Selector | None = None,
) -> Result[tuple[TaskList, TaskAdded], NotFound | InvalidInput]:
    """Add a subtask under the task named ``parent_name``.

    Adding a subtask to a completed task reopens it. This is the only
    path from Complete back to Incomplete.

    Returns:
        Ok((updated_list, TaskAdded)), Err(NotFound) if no task carries
        ``parent_name``, or Err(InvalidInput) for a failed selection.
    """
    resolved = resolve_by_name(task_list, parent_name, select)
    if isinstance(resolved, Err):
        error = resolved.error
        if isinstance(error, NotFound):
            return Err(
                NotFound(
                    f"There is no task with name {parent_name} "
                    "to which a subtask can be added."
                )
            )
        return resolved

    if due_date is not None and due_date.tzinfo is None:
        return Err(InvalidInput("The due date must carry a UTC offset."))

    parent = resolve_by_identity(task_list, resolved.value)
    child = TaskNode(
        name=name,
        description=description,
        priority=priority,
        due_date=due_date or default_due_date(),
    )
    updated = update_by_uuid(
        task_list, parent.uuid, lambda node: reopen_with_child(node, child)
    )
    event = TaskAdded(
        task_uuid=child.uuid,
        task_name=child.name,
        parent_uuid=parent.uuid,
        reopened_parent=parent.is_complete,
    )
    return Ok((updated, event))


def complete_task(
    task_list: TaskList,
    name: str,
    select: Selector | None = None,
    preserve_children: bool = True,
) -> Result[
    tuple[TaskList, TaskCompleted],
    NotFound | InvalidInput | BlockedByIncompleteChildren,
]:
    """Mark the task named ``name`` complete.

    Completing an already complete task is not an error; the returned
    event has ``already_complete`` set and the list is unchanged.

    Args:
        task_list: The list to update.
        name: Exact task name.
        select: Disambiguation callback.
        preserve_children: Keep subtasks under the completed task.

    Returns:
        Ok((updated_list, TaskCompleted)) or the error that stopped it.
    """
    resolved = resolve_by_name(task_list, name, select)
    if isinstance(resolved, Err):
        return resolved

    task = resolve_by_identity(task_list, resolved.value)
    if task.is_complete:
        event = TaskCompleted(task_uuid=task.uuid, task_name=task.name, already_complete=True)
        return Ok((task_list, event))

    completed = complete(task, preserve_children=preserve_children)
    if isinstance(completed, Err):
        return completed

    updated = update_by_uuid(task_list, task.uuid, lambda _: completed.value)
    return Ok((updated, TaskCompleted(task_uuid=task.uuid, task_name=task.name)))


def modify_task(
    task_list: TaskList,
    task_name: str,
    select: Selector | None = None,
    name: str | None = None,
    description: str | None = None,
    priority: Priority | None = None,
    year: int | None = None,
    month: int | None = None,
    day: int | None = None,
    hour: int | None = None,
    minute: int | None = None,
) -> Result[tuple[TaskList, TaskModified], NotFound | InvalidInput]:
    """Change the supplied fields of the task named ``task_name``.

    Fields left as None are not touched. Date components replace only the
    matching part of the current due date.

    Returns:
        Ok((updated_list, TaskModified)) or the error that stopped it.
    """
    resolved = resolve_by_name(task_list, task_name, select)
    if isinstance(resolved, Err):
        error = resolved.error
        if isinstance(error, NotFound):
            return Err(NotFound(f"There is no task named {task_name}."))
        return resolved

    task = resolve_by_identity(task_list, resolved.value)
    update: dict = {}
    if name is not None:
        update["name"] = name
    if description is not None:
        update["description"] = description
    if priority is not None:
        update["priority"] = priority

    if any(value is not None for value in (year, month, day, hour, minute)):
        due = build_due_date(year, month, day, hour, minute, base=task.due_date)
        if isinstance(due, Err):
            return due
        update["due_date"] = due.value

    updated = update_by_uuid(task_list, task.uuid, lambda node: node.model_copy(update=update))
    event = TaskModified(
        task_uuid=task.uuid,
        task_name=update.get("name", task.name),
        changed=sorted(update),
    )
    return Ok((updated, event))


def remove_task(
    task_list: TaskList,
    name: str,
    select: Selector | None = None,
    depth: RemovalDepth = "recursive",
) -> Result[tuple[TaskList, TaskRemoved], NotFound | InvalidInput]:
    """Remove the task named ``name`` and all of its subtasks.

    Returns:
        Ok((updated_list, TaskRemoved)), Err(NotFound) if no task carries
        the name or shallow removal cannot reach it, or Err(InvalidInput)
        for a failed selection.
    """
    resolved = resolve_by_name(task_list, name, select)
    if isinstance(resolved, Err):
        error = resolved.error
        if isinstance(error, NotFound):
            return Err(NotFound(f"There is no task named {name}."))
        return resolved

    uuid: UUID = resolved.value
    updated = remove_by_uuid(task_list, uuid, depth)
    if find_by_uuid(updated, uuid) is not None:
        return Err(
            NotFound(
                f"The task named {name} is not a direct subtask of a top-level "
                "task and cannot be removed with shallow removal."
            )
        )
    return Ok((updated, TaskRemoved(task_uuid=uuid, task_name=name)))
