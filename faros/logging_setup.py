"""Logging configuration for the faros CLI."""

import logging
import sys
from pathlib import Path


def setup_logging(
    *,
    log_dir: str | Path,
    console_level: int | str = logging.WARNING,
    file_level: int | str = logging.DEBUG,
) -> None:
    """Configure the ``faros`` logger.

    - Console handler on stderr at ``console_level``
    - File handler writing ``faros.log`` in ``log_dir`` at ``file_level``

    Safe to call more than once; earlier handlers are replaced.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("faros")
    logger.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    logger.addHandler(console)

    file_handler = logging.FileHandler(str(log_dir / "faros.log"), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    logger.addHandler(file_handler)
