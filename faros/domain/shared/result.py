"""Result monad for explicit error handling in domain operations.

This module provides a Result type (also known as Either monad) for representing
operations that can succeed with a value or fail with an error. Expected
failures (a name that matches nothing, a task blocked by its subtasks) travel
back to the caller as values instead of exceptions.

Example usage:
    >>> def parse_index(raw: str) -> Result[int, str]:
    ...     if not raw.isdigit():
    ...         return Err(f"expected [int], found {raw!r}")
    ...     return Ok(int(raw))
    ...
    >>> result = parse_index("2")
    >>> if isinstance(result, Ok):
    ...     print(f"Index: {result.value}")
    Index: 2
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents a successful result containing a value.

    Attributes:
        value: The success value of type T.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Represents a failed result containing an error.

    Attributes:
        error: The error value of type E.
    """

    error: E


# Type alias for a result that is either Ok[T] or Err[E]
# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007

