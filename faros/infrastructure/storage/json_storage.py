"""JSON file storage with Result-based error handling.

Provides a thin wrapper around file I/O operations for JSON data,
returning Result types instead of raising exceptions.
"""

import json
import logging
from pathlib import Path
from typing import Any

from faros.domain.shared import Err, Ok, PersistenceFailure, Result

logger = logging.getLogger(__name__)


class JsonStorage:
    """Low-level JSON file I/O with Result-based error handling.

    This class wraps basic JSON operations (load/save) and returns
    Result types for explicit error handling. It does not contain
    any domain logic - just file I/O.

    Example:
        storage = JsonStorage()
        result = storage.load_json(Path("list.json"))
        if isinstance(result, Ok):
            data = result.value
        else:
            print(f"Error: {result.error}")
    """

    def load_json(self, path: Path) -> Result[dict[str, Any] | None, PersistenceFailure]:
        """Load a JSON object from a file.

        Args:
            path: Path to the JSON file to read.

        Returns:
            Ok(dict) if successful, Ok(None) if the file does not exist or
            holds only whitespace, Err(PersistenceFailure) otherwise.
        """
        try:
            if not path.exists():
                logger.debug(f"{path} does not exist yet")
                return Ok(None)

            content = path.read_text(encoding="utf-8")
            if not content.strip():
                logger.debug(f"{path} is empty")
                return Ok(None)

            data = json.loads(content)

        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(PersistenceFailure(f"{path} exists, but couldn't be parsed: {e}"))
        except PermissionError:
            return Err(PersistenceFailure(f"Permission denied reading {path}"))
        except OSError as e:
            return Err(PersistenceFailure(f"Error reading {path}: {e}"))

        if not isinstance(data, dict):
            return Err(
                PersistenceFailure(
                    f"{path} exists, but couldn't be parsed: expected a JSON object"
                )
            )
        return Ok(data)

    def save_json(
        self,
        path: Path,
        data: dict[str, Any],
        indent: int = 2,
    ) -> Result[None, PersistenceFailure]:
        """Save JSON data to a file, overwriting it.

        Args:
            path: Path to the JSON file to write.
            data: Dictionary to serialize as JSON.
            indent: JSON indentation level (default 2).

        Returns:
            Ok(None) if successful, Err(PersistenceFailure) if failed.
        """
        try:
            # Ensure parent directory exists
            path.parent.mkdir(parents=True, exist_ok=True)

            content = json.dumps(data, indent=indent)
            path.write_text(content, encoding="utf-8")
            return Ok(None)

        except TypeError as e:
            return Err(PersistenceFailure(f"Your TODO list could not be serialized: {e}"))
        except PermissionError:
            return Err(PersistenceFailure(f"Permission denied writing {path}"))
        except OSError as e:
            return Err(PersistenceFailure(f"{path} could not be written to: {e}"))
