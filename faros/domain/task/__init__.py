"""Task domain - core task tree management.

This module provides the domain layer for Faros's TODO list. All exports
are pure (no I/O, no side effects).

Key Types:
    Priority - High / Medium / Low
    Completion - Complete / Incomplete
    TaskNode - A task owning its subtasks
    Tag - Dormant tag record
    TaskList - Root aggregate: top-level tasks and tags
    ListFilter - Options for the list command

Completion:
    complete - Incomplete -> Complete, guarded by subtasks
    reopen_with_child - Add a subtask, reopening a completed task

Traversal Functions:
    fold_tasks - Fundamental fold operation
    flatten - Pre-order list of visible tasks
    find_by_uuid / resolve_by_identity - Identity lookup
    update_by_uuid - Replace a task by identity
    remove_by_uuid - Remove a task and its subtasks

Resolution:
    resolve_by_name - Name to identity, with disambiguation

Domain Events:
    TaskAdded, TaskCompleted, TaskModified, TaskRemoved, TagAdded
"""

from .completion import complete, incomplete_children, reopen_with_child
from .events import (
    DomainEvent,
    TagAdded,
    TaskAdded,
    TaskCompleted,
    TaskModified,
    TaskRemoved,
)
from .listing import DEFAULT_MAX_DAYS, ListFilter, days_until, select_tasks
from .models import (
    Completion,
    Priority,
    Tag,
    TaskList,
    TaskNode,
    default_due_date,
    local_now,
)
from .resolution import Selector, find_by_name, parse_selection, resolve_by_name
from .traversal import (
    RemovalDepth,
    count_tasks,
    filter_tasks,
    find_by_uuid,
    flatten,
    fold_tasks,
    has_name,
    remove_by_uuid,
    resolve_by_identity,
    update_by_uuid,
)

__all__ = [
    # Models
    "Priority",
    "Completion",
    "TaskNode",
    "Tag",
    "TaskList",
    "local_now",
    "default_due_date",
    # Completion
    "complete",
    "incomplete_children",
    "reopen_with_child",
    # Traversal
    "RemovalDepth",
    "fold_tasks",
    "flatten",
    "filter_tasks",
    "find_by_uuid",
    "resolve_by_identity",
    "update_by_uuid",
    "remove_by_uuid",
    "has_name",
    "count_tasks",
    # Resolution
    "Selector",
    "find_by_name",
    "parse_selection",
    "resolve_by_name",
    # Listing
    "DEFAULT_MAX_DAYS",
    "ListFilter",
    "days_until",
    "select_tasks",
    # Events
    "DomainEvent",
    "TaskAdded",
    "TaskCompleted",
    "TaskModified",
    "TaskRemoved",
    "TagAdded",
]
