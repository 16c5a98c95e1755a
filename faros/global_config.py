"""Global configuration storage for Faros.

The TODO list and user preferences live in ~/.config/faros, or in the
directory named by $FAROS_HOME:

    list.json    the task list
    config.json  optional preferences (FarosConfig)
    faros.log    debug log
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ValidationError, field_validator

CONFIG_DIR_ENV = "FAROS_HOME"
LOG_LEVEL_ENV = "FAROS_LOG_LEVEL"

logger = logging.getLogger(__name__)


class FarosConfig(BaseModel):
    """User preferences.

    ``removal_depth`` and ``preserve_completed_children`` switch between
    the current behaviour and the behaviour of older versions of the list.
    """

    default_days: int = 3
    removal_depth: Literal["recursive", "shallow"] = "recursive"
    preserve_completed_children: bool = True
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


def get_config_dir() -> Path:
    """Get the Faros config directory, creating it if needed."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        config_dir = Path(override).expanduser()
    else:
        config_dir = Path.home() / ".config" / "faros"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_list_path() -> Path:
    """Get the path of the task list document."""
    return get_config_dir() / "list.json"


def get_global_config() -> FarosConfig:
    """Load preferences, falling back to defaults for an unusable file.

    $FAROS_LOG_LEVEL overrides the configured log level.
    """
    config_file = get_config_dir() / "config.json"
    data: dict[str, Any] = {}
    if config_file.exists():
        try:
            loaded = json.loads(config_file.read_text(encoding="utf-8"))
        except (ValueError, OSError) as e:
            logger.warning(f"Ignoring {config_file}, it could not be read: {e}")
        else:
            if isinstance(loaded, dict):
                data = loaded
            else:
                logger.warning(f"Ignoring {config_file}, expected a JSON object")

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        data["log_level"] = env_level

    try:
        return FarosConfig(**data)
    except ValidationError as e:
        logger.warning(f"Ignoring invalid preferences in {config_file}: {e}")
        return FarosConfig()
