"""Pure tree traversal combinators.

All functions in this module are pure - no I/O, no side effects.
They take data in, return data out.

Traversal order is always pre-order depth-first: a task is visited before
its subtasks, and subtasks in their stored order. ``flatten`` and the
functions built on it only descend into the subtasks of incomplete tasks;
identity lookups and updates reach every node the list owns.
"""

from collections.abc import Callable
from typing import Literal, TypeVar
from uuid import UUID

from faros.domain.shared import InconsistentTreeError

from .models import TaskList, TaskNode

T = TypeVar("T")

RemovalDepth = Literal["recursive", "shallow"]


# =============================================================================
# Fundamental Operations
# =============================================================================


def _roots(source: TaskList | TaskNode) -> list[TaskNode]:
    if isinstance(source, TaskList):
        return source.tasks
    return [source]


def fold_tasks(
    source: TaskList | TaskNode,
    initial: T,
    f: Callable[[T, TaskNode], T],
) -> T:
    """Fold over the visible tasks in pre-order.

    Completed tasks are visited but their subtasks are not.

    Args:
        source: A whole task list or a single task
        initial: Starting accumulator value
        f: Function (accumulator, node) -> new_accumulator

    Returns:
        Final accumulated value after visiting all visible tasks
    """

    def fold_node(acc: T, node: TaskNode) -> T:
        acc = f(acc, node)
        if not node.is_complete:
            for child in node.children:
                acc = fold_node(acc, child)
        return acc

    result = initial
    for root in _roots(source):
        result = fold_node(result, root)
    return result


def flatten(source: TaskList | TaskNode) -> list[TaskNode]:
    """Return the visible tasks as a flat, order-preserving list.

    Recomputed on every call. For a task with subtasks [c1, c2] where c1
    has subtask g1, the order is [task, c1, g1, c2].
    """

    def collect(acc: list[TaskNode], node: TaskNode) -> list[TaskNode]:
        acc.append(node)
        return acc

    return fold_tasks(source, [], collect)


def filter_tasks(
    source: TaskList | TaskNode,
    predicate: Callable[[TaskNode], bool],
) -> list[TaskNode]:
    """Return the visible tasks matching a predicate, in flatten order."""
    return [node for node in flatten(source) if predicate(node)]


def find_by_uuid(source: TaskList | TaskNode, uuid: UUID) -> TaskNode | None:
    """Find a task anywhere in the tree by identity.

    Unlike ``flatten`` this also searches subtasks kept under completed
    tasks. By uuid uniqueness at most one node can match.
    """

    def search(node: TaskNode) -> TaskNode | None:
        if node.uuid == uuid:
            return node
        for child in node.children:
            found = search(child)
            if found:
                return found
        return None

    for root in _roots(source):
        found = search(root)
        if found:
            return found
    return None


def resolve_by_identity(task_list: TaskList, uuid: UUID) -> TaskNode:
    """Return the task with ``uuid``.

    Only call this with identities obtained from the same task list.

    Raises:
        InconsistentTreeError: If no task carries the identity.
    """
    node = find_by_uuid(task_list, uuid)
    if node is None:
        raise InconsistentTreeError(f"Task {uuid} vanished from the task list")
    return node


def update_by_uuid(
    task_list: TaskList,
    uuid: UUID,
    update: Callable[[TaskNode], TaskNode],
) -> TaskList:
    """Replace the task with ``uuid`` by ``update(task)``.

    Args:
        task_list: The list to update
        uuid: Identity of the task to replace
        update: Function (node) -> new_node

    Returns:
        New task list with the node replaced

    Raises:
        InconsistentTreeError: If no task carries the identity.
    """
    found = False

    def update_node(node: TaskNode) -> TaskNode:
        nonlocal found
        if found:
            return node
        if node.uuid == uuid:
            found = True
            return update(node)
        new_children = [update_node(child) for child in node.children]
        if not found:
            return node
        return node.model_copy(update={"children": new_children})

    new_tasks = [update_node(task) for task in task_list.tasks]
    if not found:
        raise InconsistentTreeError(f"Task {uuid} vanished from the task list")
    return task_list.model_copy(update={"tasks": new_tasks})


def remove_by_uuid(
    task_list: TaskList,
    uuid: UUID,
    depth: RemovalDepth = "recursive",
) -> TaskList:
    """Remove the task with ``uuid`` together with its subtasks.

    Args:
        task_list: The list to remove from
        uuid: Identity of the task to remove
        depth: "recursive" removes the task wherever it is, top level
            included. "shallow" only filters the direct subtasks of each
            top-level task, as older versions of the list did.

    Returns:
        New task list without the task
    """
    if depth == "shallow":
        return task_list.model_copy(
            update={
                "tasks": [
                    task.model_copy(
                        update={"children": [c for c in task.children if c.uuid != uuid]}
                    )
                    for task in task_list.tasks
                ]
            }
        )

    def prune(nodes: list[TaskNode]) -> list[TaskNode]:
        return [
            node.model_copy(update={"children": prune(node.children)})
            for node in nodes
            if node.uuid != uuid
        ]

    return task_list.model_copy(update={"tasks": prune(task_list.tasks)})


# =============================================================================
# Predicate Functions
# =============================================================================


def has_name(name: str) -> Callable[[TaskNode], bool]:
    """Return a predicate matching tasks whose name equals ``name`` exactly."""

    def predicate(node: TaskNode) -> bool:
        return node.name == name

    return predicate


def count_tasks(task_list: TaskList) -> tuple[int, int]:
    """Count visible tasks as (complete, total)."""

    def count(acc: tuple[int, int], node: TaskNode) -> tuple[int, int]:
        done, total = acc
        return done + int(node.is_complete), total + 1

    return fold_tasks(task_list, (0, 0), count)
