"""src/cwdswitch/features/directory/usecases/change_directory.py
Where: Directory feature usecases layer.
What: Switch the process working directory and report the previous one.
Why: Give callers a way back, or the OS error when there is none.
"""

from __future__ import annotations

import logging
from logging import Logger, getLogger
from typing import Any, final

from ..domain.models import (
    ChangeFailure,
    ChangeResult,
    ChangeSuccess,
    DirectoryEvent,
    FailureStage,
)
from .ports import WorkingDirectoryGateway


@final
class DirectoryChanger:
    """Change the working directory through an injected gateway.

    The working directory is process-wide. This class takes no lock of its
    own; callers sharing a process across threads must serialize access
    themselves (see ``DirectoryService``).
    """

    _gateway: WorkingDirectoryGateway
    _logger: Logger

    def __init__(
        self,
        gateway: WorkingDirectoryGateway,
        *,
        logger: Logger | None = None,
    ) -> None:
        self._gateway = gateway
        self._logger = logger or getLogger(__name__)

    @property
    def gateway(self) -> WorkingDirectoryGateway:
        return self._gateway

    def change(self, target_path: str) -> ChangeResult:
        """Make ``target_path`` the working directory.

        Args:
            target_path: Directory to switch into. Passed to the OS unmodified.

        Returns:
            ChangeResult: ``ChangeSuccess`` carrying the directory captured
            before the switch, or ``ChangeFailure`` carrying the OS message
            and errno. The switch is not attempted when the current directory
            cannot be read.
        """

        try:
            previous = self._gateway.get_current_directory()
        except OSError as exc:
            failure = ChangeFailure.from_os_error(exc, FailureStage.QUERY)
            self._log_failure(failure, target_path)
            return failure

        try:
            self._gateway.set_current_directory(target_path)
        except OSError as exc:
            failure = ChangeFailure.from_os_error(exc, FailureStage.TRANSITION)
            self._log_failure(failure, target_path)
            return failure

        self._log_event(
            logging.DEBUG,
            DirectoryEvent.CHANGE_SUCCESS,
            "Changed working directory %s -> %s",
            previous,
            target_path,
            previous_path=previous,
            target_path=target_path,
        )
        return ChangeSuccess(previous=previous)

    def restore(self, previous_path: str) -> ChangeFailure | None:
        """Switch back to ``previous_path`` without reading the current directory.

        The directory being left may no longer exist, so only the transition
        is attempted.

        Returns:
            ChangeFailure | None: The OS error, or ``None`` once restored.
        """

        try:
            self._gateway.set_current_directory(previous_path)
        except OSError as exc:
            return ChangeFailure.from_os_error(exc, FailureStage.TRANSITION)
        return None

    def _log_failure(self, failure: ChangeFailure, target_path: str) -> None:
        self._log_event(
            logging.DEBUG,
            DirectoryEvent.CHANGE_ERROR,
            "Working directory %s failed for %s: [%d] %s",
            failure.stage.value,
            target_path,
            failure.code,
            failure.message,
            target_path=target_path,
            stage=failure.stage.value,
            error_code=failure.code,
            error_message=failure.message,
        )

    def _log_event(
        self,
        level: int,
        event: DirectoryEvent,
        message: str,
        *message_args: object,
        **context: Any,
    ) -> None:
        extra: dict[str, Any] = {"directory_event": event.value}
        extra.update(context)
        self._logger.log(level, message, *message_args, extra=extra, stacklevel=2)


__all__ = ["DirectoryChanger"]
