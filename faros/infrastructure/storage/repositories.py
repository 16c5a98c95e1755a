"""Repository for the task list aggregate.

Wraps list.json file operations with Result-based error handling. The
whole document is read once per invocation and written back once.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from faros.domain.shared import Err, Ok, PersistenceFailure, Result
from faros.domain.task import TaskList
from faros.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)


class TaskListRepository:
    """Repository for task list persistence."""

    def __init__(self, path: Path, storage: JsonStorage | None = None) -> None:
        """Initialize the repository.

        Args:
            path: Location of the task list document.
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self.path = path
        self._storage = storage or JsonStorage()

    def load(self) -> Result[TaskList, PersistenceFailure]:
        """Load the task list.

        A missing or empty document yields an empty task list. Anything
        else that is not a valid task list is an error.

        Returns:
            Ok(TaskList) if successful, Err(PersistenceFailure) otherwise.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return Err(
                PersistenceFailure(f"{self.path.parent} does not exist and could not be created: {e}")
            )

        result = self._storage.load_json(self.path)
        if isinstance(result, Err):
            return result

        if result.value is None:
            logger.info(f"Starting a new task list at {self.path}")
            return Ok(TaskList())

        try:
            task_list = TaskList.model_validate(result.value)
        except ValidationError as e:
            return Err(PersistenceFailure(f"{self.path} exists, but couldn't be parsed: {e}"))

        logger.debug(f"Loaded {len(task_list.tasks)} top-level task(s) from {self.path}")
        return Ok(task_list)

    def save(self, task_list: TaskList) -> Result[None, PersistenceFailure]:
        """Overwrite the task list document.

        Args:
            task_list: TaskList instance to persist.

        Returns:
            Ok(None) if successful, Err(PersistenceFailure) if failed.
        """
        try:
            document = task_list.model_dump(mode="json")
        except ValueError as e:
            # PydanticSerializationError is a ValueError
            return Err(PersistenceFailure(f"Your TODO list could not be serialized: {e}"))

        result = self._storage.save_json(self.path, document)
        if isinstance(result, Ok):
            logger.debug(f"Saved task list to {self.path}")
        return result

