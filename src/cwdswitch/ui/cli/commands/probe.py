"""Probe command implementation for the CLI."""

from __future__ import annotations

from typing import final

from cwdswitch.features.directory import DirectoryChangeError
from cwdswitch.ui.cli.args.options import ProbeArgs

from .executor import CommandExecutor


@final
class ProbeCommand(CommandExecutor[ProbeArgs]):
    """Switch into the target and straight back."""

    def execute(self) -> int:
        try:
            with self.service.switched(self.args.target) as previous:
                pass
        except DirectoryChangeError as exc:
            # exc.target is the previous directory when only the restore failed.
            self.display.show_failure(exc.failure, exc.target)
            return 1

        self.display.show_reachable(self.args.target, previous, quiet=self.args.quiet)
        return 0
