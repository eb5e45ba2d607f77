"""
Summary: Host calling-convention adapter for the change-directory operation.
Why: Scripting hosts expect multiple return values instead of result objects.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Final

from cwdswitch.application.services import DirectoryService

MODULE_NAME: Final[str] = "cwdswitch.chdir"

HostReturn = tuple[str] | tuple[None, str, int]

_service = DirectoryService()


def _check_path(value: object) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, os.PathLike):
        path = os.fspath(value)
        if isinstance(path, str):
            return path
    raise TypeError(
        f"bad argument #1 to 'chdir' (string expected, got {type(value).__name__})"
    )


def chdir(path: object) -> HostReturn:
    """Change the working directory.

    Returns ``(previous,)`` on success and ``(None, message, errno)`` on failure.

    Raises:
        TypeError: If ``path`` is not a string or string path-like object.
    """

    return _service.change(_check_path(path)).as_host_tuple()


def open_module() -> Callable[[object], HostReturn]:
    """Return the callable a host registers under ``MODULE_NAME``."""

    return chdir


__all__ = ["HostReturn", "MODULE_NAME", "chdir", "open_module"]
