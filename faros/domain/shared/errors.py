"""Error values carried inside ``Err`` results.

Each error knows whether it is fatal to the whole invocation. Only the
interface layer acts on that flag; domain code just returns the value.
"""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class FarosError:
    """Base error value.

    Attributes:
        message: Human-readable description shown to the user.
    """

    message: str

    fatal: ClassVar[bool] = True

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class NotFound(FarosError):
    """A task name (or tag name) matched nothing.

    Scoped to a single name: multi-name commands report it and move on.
    """

    fatal: ClassVar[bool] = False


@dataclass(frozen=True)
class BlockedByIncompleteChildren(FarosError):
    """A task cannot be completed while a direct subtask is incomplete."""


@dataclass(frozen=True)
class InvalidInput(FarosError):
    """User input could not be used (bad index, impossible date, ...)."""


@dataclass(frozen=True)
class PersistenceFailure(FarosError):
    """The task list could not be read, parsed or written."""


class InconsistentTreeError(RuntimeError):
    """An identity the engine itself produced is missing from the tree."""
