"""Working directory adapter backed by the local operating system."""

from __future__ import annotations

import os

from ..usecases.ports import WorkingDirectoryGateway


class LocalWorkingDirectoryGateway(WorkingDirectoryGateway):
    """Thin wrapper around ``os.getcwd`` and ``os.chdir``."""

    def get_current_directory(self) -> str:
        return os.getcwd()

    def set_current_directory(self, path: str) -> None:
        os.chdir(path)


__all__ = ["LocalWorkingDirectoryGateway"]
