"""Run code inside another working directory and always switch back."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from logging import getLogger
from typing import ParamSpec, TypeVar

from ..domain.models import ChangeSuccess, DirectoryChangeError, DirectoryEvent
from .change_directory import DirectoryChanger

P = ParamSpec("P")
R = TypeVar("R")

_logger = getLogger(__name__)


@contextmanager
def switched_directory(changer: DirectoryChanger, target: str) -> Iterator[str]:
    """Switch into ``target`` for the duration of the block.

    Yields the directory that was current on entry. On exit the previous
    directory is restored. A failed restore raises ``DirectoryChangeError``
    unless the block is already raising, in which case the block's
    exception is kept and the restore failure is logged as a warning.

    Raises:
        DirectoryChangeError: If ``target`` cannot be entered.
    """

    entered = changer.change(target)
    if not isinstance(entered, ChangeSuccess):
        raise DirectoryChangeError(entered, target)

    previous = entered.previous
    body_failed = False
    try:
        yield previous
    except BaseException:
        body_failed = True
        raise
    finally:
        failure = changer.restore(previous)
        if failure is None:
            _logger.debug(
                "Restored working directory to %s",
                previous,
                extra={
                    "directory_event": DirectoryEvent.RESTORE_SUCCESS.value,
                    "target_path": previous,
                },
            )
        else:
            # Raised below unless the block's own exception is propagating.
            _logger.log(
                logging.WARNING if body_failed else logging.DEBUG,
                "Could not restore working directory to %s: [%d] %s",
                previous,
                failure.code,
                failure.message,
                extra={
                    "directory_event": DirectoryEvent.RESTORE_ERROR.value,
                    "target_path": previous,
                    "error_code": failure.code,
                    "error_message": failure.message,
                },
            )
            if not body_failed:
                raise DirectoryChangeError(failure, previous)


def run_in_directory(
    changer: DirectoryChanger,
    target: str,
    func: Callable[P, R],
    *args: P.args,
    **kwargs: P.kwargs,
) -> R:
    """Call ``func`` with ``target`` as the working directory and return its value."""

    with switched_directory(changer, target):
        return func(*args, **kwargs)


__all__ = ["run_in_directory", "switched_directory"]
