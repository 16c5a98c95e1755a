"""Storage infrastructure for Faros.

Provides the persistence layer for the task list, using Result monads
for explicit error handling.
"""

from faros.infrastructure.storage.json_storage import JsonStorage
from faros.infrastructure.storage.repositories import TaskListRepository

__all__ = [
    "JsonStorage",
    "TaskListRepository",
]
