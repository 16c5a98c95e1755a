"""Task domain models.

Pure domain models for the TODO list. Uses Pydantic so the same models
validate the on-disk document and serialize it back.

Wire shape of a task's completion (compatible with existing list.json
files):

    "completion": "Complete"
    "completion": {"Incomplete": [<child task>, ...]}

Subtasks kept under a completed task are written beside it as
``"archive": [...]``.
"""

from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID, uuid4

from pydantic import (
    BaseModel,
    Field,
    SerializationInfo,
    model_serializer,
    model_validator,
)


def local_now() -> datetime:
    """Return the current time as an aware datetime in the local offset."""
    return datetime.now().astimezone()


def default_due_date() -> datetime:
    """Today at 23:59 local time."""
    return local_now().replace(hour=23, minute=59, second=0, microsecond=0)


class Priority(str, Enum):
    """Priority of a task."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Completion(str, Enum):
    """Completion state of a task."""

    INCOMPLETE = "Incomplete"
    COMPLETE = "Complete"


class TaskNode(BaseModel):
    """A task in the tree, owning its subtasks.

    ``children`` is kept separately from ``completion`` so that completing
    a task does not throw its subtasks away. Traversal only descends into
    the children of incomplete tasks.
    """

    name: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    due_date: datetime = Field(default_factory=default_due_date)
    completion: Completion = Completion.INCOMPLETE
    uuid: UUID = Field(default_factory=uuid4)
    tags: list[UUID] = Field(default_factory=list)
    children: list["TaskNode"] = Field(default_factory=list, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _unpack_completion(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        completion = data.get("completion")
        if isinstance(completion, dict):
            if set(completion) != {"Incomplete"}:
                raise ValueError(f"Unknown completion variant: {sorted(completion)}")
            data = {
                **data,
                "completion": Completion.INCOMPLETE,
                "children": completion["Incomplete"],
            }
        elif type(completion) is str and completion != Completion.COMPLETE.value:
            # Only the payload-free variant may appear as a bare string.
            raise ValueError(f"Unknown completion variant: {completion!r}")
        elif "archive" in data:
            data = dict(data)
            data["children"] = data.pop("archive")
        return data

    @model_serializer(mode="wrap")
    def _pack_completion(self, handler: Any, info: SerializationInfo) -> dict[str, Any]:
        data = handler(self)
        children = [child.model_dump(mode=info.mode) for child in self.children]
        if self.completion == Completion.COMPLETE:
            data["completion"] = Completion.COMPLETE.value
            if children:
                data["archive"] = children
        else:
            data["completion"] = {Completion.INCOMPLETE.value: children}
        return data

    @property
    def is_complete(self) -> bool:
        """Check if the task is marked complete."""
        return self.completion == Completion.COMPLETE


class Tag(BaseModel):
    """A tag that tasks may reference by uuid.

    Tags are stored and round-tripped but no operation reads them yet.
    """

    name: str
    description: str = ""
    uuid: UUID = Field(default_factory=uuid4)


class TaskList(BaseModel):
    """The root of the TODO list.

    Owns the ordered top-level tasks (the forest) and the tag collection.
    """

    tasks: list[TaskNode] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
