"""Task domain events.

Domain events are immutable records of a change an application service
made to the task list. The CLI logs them and turns them into user
feedback.

All events are pure data structures - no I/O, no side effects.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class DomainEvent(BaseModel):
    """Base class for all domain events.

    Each event has a unique ID and timestamp.
    """

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = {"frozen": True}


class TaskAdded(DomainEvent):
    """A task was added, at the top level when ``parent_uuid`` is None."""

    task_uuid: UUID
    task_name: str
    parent_uuid: UUID | None = None
    reopened_parent: bool = False


class TaskCompleted(DomainEvent):
    """A task was marked complete.

    ``already_complete`` is set when the task was complete beforehand and
    nothing changed.
    """

    task_uuid: UUID
    task_name: str
    already_complete: bool = False


class TaskModified(DomainEvent):
    """Fields of a task were changed."""

    task_uuid: UUID
    task_name: str
    changed: list[str]


class TaskRemoved(DomainEvent):
    """A task and its subtasks were removed."""

    task_uuid: UUID
    task_name: str


class TagAdded(DomainEvent):
    """A tag was added to the list."""

    tag_uuid: UUID
    tag_name: str
