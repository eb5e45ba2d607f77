"""Ports for the directory feature.

Where: features/directory/usecases.
What: Protocol describing the process working directory as an injected resource.
Why: Let the changer run against the real OS or a fake without touching global state.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class WorkingDirectoryGateway(Protocol):
    """Read and replace the process-wide working directory.

    Both methods raise ``OSError`` exactly as the underlying OS call does.
    """

    def get_current_directory(self) -> str:
        """Return the current working directory."""

        ...

    def set_current_directory(self, path: str) -> None:
        """Make ``path`` the current working directory."""

        ...


__all__ = ["WorkingDirectoryGateway"]
