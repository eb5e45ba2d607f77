"""src/cwdswitch/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Build the directory service from configuration in one place.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from cwdswitch.application.services import DirectoryService
from cwdswitch.config import Config
from cwdswitch.ui.cli.args.options import CLIArgs
from cwdswitch.ui.cli.display import ResultDisplay

ArgsT = TypeVar("ArgsT", bound=CLIArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    service: DirectoryService
    display: ResultDisplay

    def __init__(
        self,
        args: ArgsT,
        *,
        service: DirectoryService | None = None,
        display: ResultDisplay | None = None,
    ) -> None:
        self.args = args
        self.service = service or self._build_service()
        self.display = display or ResultDisplay()

    @staticmethod
    def _build_service() -> DirectoryService:
        if Config.load().serialize_changes:
            return DirectoryService.serialized()
        return DirectoryService()

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            Process exit code.
        """
        pass
