"""Completion state machine for a single task.

Transitions:
    Incomplete -> Complete   when every direct subtask is complete
    Complete   -> Complete   no-op, reported as "already complete"

There is no transition back to Incomplete here. The only way a completed
task becomes incomplete again is by adding a subtask to it (see
``reopen_with_child``).

All functions are pure: they return new nodes and never touch the input.
"""

from faros.domain.shared import BlockedByIncompleteChildren, Err, Ok, Result

from .models import Completion, TaskNode


def incomplete_children(node: TaskNode) -> list[TaskNode]:
    """Return the direct subtasks of ``node`` that are still incomplete."""
    return [child for child in node.children if not child.is_complete]


def complete(
    node: TaskNode,
    preserve_children: bool = True,
) -> Result[TaskNode, BlockedByIncompleteChildren]:
    """Mark a task complete.

    Args:
        node: The task to complete.
        preserve_children: Keep the (all complete) subtasks under the
            completed task. When False the subtasks are dropped, which is
            how older versions of the list behaved.

    Returns:
        Ok(node) unchanged if it was already complete, Ok(completed node)
        on success, or Err(BlockedByIncompleteChildren) if any direct
        subtask is still incomplete.
    """
    if node.is_complete:
        return Ok(node)

    blocking = incomplete_children(node)
    if blocking:
        names = ", ".join(child.name for child in blocking)
        return Err(
            BlockedByIncompleteChildren(
                f"The task named {node.name} cannot be completed, "
                f"as it has incomplete subtask(s): {names}."
            )
        )

    update: dict = {"completion": Completion.COMPLETE}
    if not preserve_children:
        update["children"] = []
    return Ok(node.model_copy(update=update))


def reopen_with_child(node: TaskNode, child: TaskNode) -> TaskNode:
    """Append a subtask, reopening the task if it was complete."""
    return node.model_copy(
        update={
            "completion": Completion.INCOMPLETE,
            "children": [*node.children, child],
        }
    )
