"""Run command implementation for the CLI."""

from __future__ import annotations

import subprocess
from typing import Final, final

from cwdswitch.features.directory import DirectoryChangeError
from cwdswitch.platform.logging import logger
from cwdswitch.ui.cli.args.options import RunArgs

from .executor import CommandExecutor

COMMAND_NOT_RUNNABLE: Final[int] = 127


@final
class RunCommand(CommandExecutor[RunArgs]):
    """Run a child process inside the target, then restore the directory."""

    def execute(self) -> int:
        try:
            with self.service.switched(self.args.target):
                completed = subprocess.run(self.args.argv, check=False)
        except DirectoryChangeError as exc:
            self.display.show_failure(exc.failure, exc.target)
            return 1
        except OSError as exc:
            logger.error("Cannot run %s: %s", self.args.argv[0], exc)
            return COMMAND_NOT_RUNNABLE

        logger.debug("%s exited with %d", self.args.argv[0], completed.returncode)
        # Negative return codes mean the child died from a signal.
        if completed.returncode < 0:
            return 128 - completed.returncode
        return completed.returncode
