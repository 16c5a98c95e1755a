"""Tag application service.

Tags are stored with the list but nothing reads them yet, so the only
operation is adding one.
"""

from faros.domain.shared import Ok, Result
from faros.domain.task import Tag, TagAdded, TaskList


def add_tag(
    task_list: TaskList,
    name: str,
    description: str = "",
) -> Result[tuple[TaskList, TagAdded], str]:
    """Append a new tag with a fresh identity.

    Args:
        task_list: The list to add to.
        name: Tag name.
        description: Free-text description.

    Returns:
        Ok((updated_list, TagAdded)).
    """
    tag = Tag(name=name, description=description)
    updated = task_list.model_copy(update={"tags": [*task_list.tags, tag]})
    return Ok((updated, TagAdded(tag_uuid=tag.uuid, tag_name=tag.name)))
