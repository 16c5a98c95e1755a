"""Infrastructure layer for Faros.

This module provides clean interfaces for I/O operations, wrapping file
storage with Result monads for explicit error handling.

Exports:
    Storage:
        - JsonStorage: Low-level JSON file I/O
        - TaskListRepository: Task list persistence
"""

from faros.infrastructure.storage import JsonStorage, TaskListRepository

__all__ = [
    "JsonStorage",
    "TaskListRepository",
]
