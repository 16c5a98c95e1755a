"""Listing filter for the ``list`` command.

Pure function over the flattened task list: select by priority and due
window, sort by due date, truncate.
"""

import math
from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from .models import Priority, TaskList, TaskNode, local_now
from .traversal import flatten

DEFAULT_MAX_DAYS = 3


class ListFilter(BaseModel):
    """Options for selecting tasks to list.

    With no priority flag set every priority passes. There is no lower
    bound on the due window, so overdue tasks are always listed.
    """

    high: bool = False
    medium: bool = False
    low: bool = False
    max_days: int = DEFAULT_MAX_DAYS
    max_count: int | None = Field(default=None, ge=0)
    include_complete: bool = True

    def priorities(self) -> set[Priority]:
        """Return the priorities that pass this filter."""
        selected = {
            Priority.HIGH: self.high,
            Priority.MEDIUM: self.medium,
            Priority.LOW: self.low,
        }
        if not any(selected.values()):
            return set(Priority)
        return {priority for priority, flag in selected.items() if flag}


def days_until(due_date: datetime, now: datetime) -> int:
    """Whole days from ``now`` until ``due_date``, truncated toward zero."""
    return math.trunc((due_date - now) / timedelta(days=1))


def matches(node: TaskNode, list_filter: ListFilter, now: datetime) -> bool:
    """Check whether a single task passes the filter."""
    if not list_filter.include_complete and node.is_complete:
        return False
    if node.priority not in list_filter.priorities():
        return False
    return days_until(node.due_date, now) <= list_filter.max_days


def select_tasks(
    task_list: TaskList,
    list_filter: ListFilter,
    now: datetime | None = None,
) -> list[TaskNode]:
    """Select, sort and truncate tasks for display.

    Args:
        task_list: The list to select from
        list_filter: Selection options
        now: Reference instant, defaults to the current local time

    Returns:
        Matching tasks sorted by due date (ties keep flatten order),
        at most ``max_count`` of them
    """
    now = now or local_now()
    selected = [node for node in flatten(task_list) if matches(node, list_filter, now)]
    selected.sort(key=lambda node: node.due_date)
    if list_filter.max_count is not None:
        selected = selected[: list_filter.max_count]
    return selected
