"""Shared domain utilities for Faros.

This package provides common building blocks used across domain modules:

- Result monad for explicit error handling
- Error values carried by ``Err`` results

Example usage:
    >>> from faros.domain.shared import Err, NotFound, Ok, Result
    >>>
    >>> def find_task(name: str) -> Result[str, NotFound]:
    ...     if name == "missing":
    ...         return Err(NotFound(f"No task with name {name}."))
    ...     return Ok(name)
"""

from faros.domain.shared.errors import (
    BlockedByIncompleteChildren,
    FarosError,
    InconsistentTreeError,
    InvalidInput,
    NotFound,
    PersistenceFailure,
)
from faros.domain.shared.result import (
    Err,
    Ok,
    Result,
)

__all__ = [
    # Result monad
    "Ok",
    "Err",
    "Result",
    # Errors
    "FarosError",
    "NotFound",
    "BlockedByIncompleteChildren",
    "InvalidInput",
    "PersistenceFailure",
    "InconsistentTreeError",
]
