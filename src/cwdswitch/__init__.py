"""Change the process working directory and report where it was.

``change_directory`` returns ``ChangeSuccess(previous)`` or
``ChangeFailure(message, code, stage)``; it never raises for OS errors.
The working directory is process-wide, so concurrent callers need
``PROCESS_DIRECTORY_LOCK`` (or their own lock) around it.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager

from cwdswitch.application.services import PROCESS_DIRECTORY_LOCK, DirectoryService
from cwdswitch.features.directory import (
    ChangeFailure,
    ChangeResult,
    ChangeSuccess,
    DirectoryChangeError,
    DirectoryChanger,
    FailureStage,
    WorkingDirectoryGateway,
)
from cwdswitch.features.directory.adapters import LocalWorkingDirectoryGateway

__version__ = "0.1.0"

_default_service = DirectoryService()


def change_directory(target_path: str | os.PathLike[str]) -> ChangeResult:
    """Change the working directory to ``target_path``."""

    return _default_service.change(os.fspath(target_path))


@contextmanager
def switched_directory(target_path: str | os.PathLike[str]) -> Iterator[str]:
    """Work inside ``target_path`` and restore the previous directory afterwards."""

    with _default_service.switched(os.fspath(target_path)) as previous:
        yield previous


__all__ = [
    "PROCESS_DIRECTORY_LOCK",
    "ChangeFailure",
    "ChangeResult",
    "ChangeSuccess",
    "DirectoryChangeError",
    "DirectoryChanger",
    "DirectoryService",
    "FailureStage",
    "LocalWorkingDirectoryGateway",
    "WorkingDirectoryGateway",
    "change_directory",
    "switched_directory",
]
