"""Name-based task resolution.

Task names are not unique. Resolving a name that matches several tasks
needs a human to pick one, so the caller supplies a ``Selector``: a
function that is shown the candidates (in flatten order) and returns the
raw reply. Parsing and validating that reply happens here so every
interface gets the same rules.
"""

from collections.abc import Callable, Sequence
from uuid import UUID

from faros.domain.shared import Err, InvalidInput, NotFound, Ok, Result

from .models import TaskList, TaskNode
from .traversal import filter_tasks, has_name

Selector = Callable[[Sequence[TaskNode]], str]


def parse_selection(raw: str, count: int) -> Result[int, InvalidInput]:
    """Parse a zero-based candidate index typed by the user.

    Args:
        raw: The reply as typed, surrounding whitespace allowed.
        count: Number of candidates offered.

    Returns:
        Ok(index) with 0 <= index < count, or Err(InvalidInput).
    """
    text = raw.strip()
    if not text.isdecimal():
        return Err(InvalidInput(f'Unexpected value, expected [int], found "{text}".'))
    index = int(text)
    if index >= count:
        return Err(InvalidInput(f"Expected a value less than {count}, found {index}."))
    return Ok(index)


def find_by_name(task_list: TaskList, name: str) -> list[TaskNode]:
    """Return every visible task named exactly ``name``, in flatten order."""
    return filter_tasks(task_list, has_name(name))


def resolve_by_name(
    task_list: TaskList,
    name: str,
    select: Selector | None = None,
) -> Result[UUID, NotFound | InvalidInput]:
    """Resolve a task name to a single task identity.

    Args:
        task_list: The list to search.
        name: Exact task name.
        select: Called only when more than one task matches.

    Returns:
        Ok(uuid) of the single (or selected) match, Err(NotFound) when
        nothing matches, Err(InvalidInput) when the selection is unusable
        or several tasks match and no selector was given.
    """
    matches = find_by_name(task_list, name)

    if not matches:
        return Err(NotFound(f"No task with name {name}."))
    if len(matches) == 1:
        return Ok(matches[0].uuid)
    if select is None:
        return Err(
            InvalidInput(f"There is more than one task named {name} and none was selected.")
        )

    selection = parse_selection(select(matches), len(matches))
    if isinstance(selection, Err):
        return selection
    return Ok(matches[selection.value].uuid)
