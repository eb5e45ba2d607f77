"""Application service wiring the working directory adapter into the changer."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager, nullcontext
from logging import Logger, getLogger
from typing import Final, ParamSpec, TypeVar, final

from cwdswitch.features.directory import (
    ChangeResult,
    DirectoryChanger,
    WorkingDirectoryGateway,
    switched_directory,
)
from cwdswitch.features.directory.adapters import LocalWorkingDirectoryGateway

P = ParamSpec("P")
R = TypeVar("R")

# Opt-in lock for code that wants every change in the process serialized.
PROCESS_DIRECTORY_LOCK: Final[threading.RLock] = threading.RLock()


@final
class DirectoryService:
    """Application façade around ``DirectoryChanger``.

    When ``lock`` is given, each query+transition pair and each scoped
    switch runs while holding it. Without a lock nothing is serialized.
    """

    _changer: DirectoryChanger
    _lock: AbstractContextManager[object] | None

    def __init__(
        self,
        *,
        gateway: WorkingDirectoryGateway | None = None,
        lock: AbstractContextManager[object] | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._changer = DirectoryChanger(
            gateway or LocalWorkingDirectoryGateway(),
            logger=logger or getLogger(__name__),
        )
        self._lock = lock

    @classmethod
    def serialized(cls, *, gateway: WorkingDirectoryGateway | None = None) -> "DirectoryService":
        """Build a service sharing ``PROCESS_DIRECTORY_LOCK``."""

        return cls(gateway=gateway, lock=PROCESS_DIRECTORY_LOCK)

    @property
    def changer(self) -> DirectoryChanger:
        return self._changer

    def _guard(self) -> AbstractContextManager[object]:
        return self._lock if self._lock is not None else nullcontext()

    def change(self, target_path: str) -> ChangeResult:
        """Change directory, returning the previous one or the OS error."""

        with self._guard():
            return self._changer.change(target_path)

    @contextmanager
    def switched(self, target_path: str) -> Iterator[str]:
        """Hold the lock (if any) for the whole block, then restore the directory."""

        with self._guard(), switched_directory(self._changer, target_path) as previous:
            yield previous

    def run_in(
        self,
        target_path: str,
        func: Callable[P, R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Call ``func`` inside ``target_path`` and return its value."""

        with self.switched(target_path):
            return func(*args, **kwargs)


__all__ = ["DirectoryService", "PROCESS_DIRECTORY_LOCK"]
