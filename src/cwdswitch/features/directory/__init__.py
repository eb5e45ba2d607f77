"""Public surface for the directory feature."""

from .domain.models import (
    ChangeFailure,
    ChangeResult,
    ChangeSuccess,
    DirectoryChangeError,
    DirectoryEvent,
    FailureStage,
)
from .usecases.change_directory import DirectoryChanger
from .usecases.ports import WorkingDirectoryGateway
from .usecases.scope import run_in_directory, switched_directory

__all__ = [
    "ChangeFailure",
    "ChangeResult",
    "ChangeSuccess",
    "DirectoryChangeError",
    "DirectoryChanger",
    "DirectoryEvent",
    "FailureStage",
    "WorkingDirectoryGateway",
    "run_in_directory",
    "switched_directory",
]
