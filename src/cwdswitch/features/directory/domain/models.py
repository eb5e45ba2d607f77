"""src/cwdswitch/features/directory/domain/models.py
Where: Directory feature domain layer.
What: Discriminated results and structured events for working directory changes.
Why: Keep the success/failure contract independent of any OS adapter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal, TypeAlias


class FailureStage(StrEnum):
    """Which OS call reported the failure."""

    QUERY = "query"
    TRANSITION = "transition"


class DirectoryEvent(StrEnum):
    """Structured event identifiers for directory change logs."""

    CHANGE_SUCCESS = "directory.change.success"
    CHANGE_ERROR = "directory.change.error"
    RESTORE_SUCCESS = "directory.restore.success"
    RESTORE_ERROR = "directory.restore.error"


@dataclass(slots=True, frozen=True)
class ChangeSuccess:
    """The directory changed; ``previous`` is where the process was before."""

    previous: str

    @property
    def ok(self) -> Literal[True]:
        return True

    def as_host_tuple(self) -> tuple[str]:
        """Return the single-value form handed back to host callers."""

        return (self.previous,)


@dataclass(slots=True, frozen=True)
class ChangeFailure:
    """The OS refused either the query or the transition."""

    message: str
    code: int
    stage: FailureStage

    @property
    def ok(self) -> Literal[False]:
        return False

    def as_host_tuple(self) -> tuple[None, str, int]:
        """Return the ``(None, message, code)`` form handed back to host callers."""

        return (None, self.message, self.code)

    @classmethod
    def from_os_error(cls, error: OSError, stage: FailureStage) -> "ChangeFailure":
        """Build a failure from the OS-supplied message and errno."""

        message = error.strerror or str(error) or error.__class__.__name__
        code = error.errno if error.errno is not None else 0
        return cls(message=message, code=code, stage=stage)


ChangeResult: TypeAlias = ChangeSuccess | ChangeFailure


class DirectoryChangeError(OSError):
    """Raised by scoped helpers when a directory change cannot be honoured."""

    def __init__(self, failure: ChangeFailure, target: str) -> None:
        super().__init__(failure.code, failure.message, target)
        self.failure: ChangeFailure = failure
        self.target: str = target

    @property
    def stage(self) -> FailureStage:
        return self.failure.stage

    def __str__(self) -> str:
        return (
            f"Cannot change working directory to {self.target!r} "
            f"({self.failure.stage.value} failed, errno {self.failure.code}): {self.failure.message}"
        )


__all__ = [
    "ChangeFailure",
    "ChangeResult",
    "ChangeSuccess",
    "DirectoryChangeError",
    "DirectoryEvent",
    "FailureStage",
]
