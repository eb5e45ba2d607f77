"""src/cwdswitch/ui/cli/display/result.py
Where: CLI display layer.
What: Render change-directory outcomes for the CLI.
Why: Keep console output formatting consistent across subcommands.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape

from cwdswitch.features.directory import ChangeFailure


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console
    error_console: Console

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def show_reachable(self, target: str, previous: str, *, quiet: bool = False) -> None:
        """Print that ``target`` could be entered and left again."""

        if quiet:
            return
        self.console.print(
            f"[green]{escape(target)}[/green] reachable; previous directory: {escape(previous)}"
        )

    def show_failure(self, failure: ChangeFailure, target: str) -> None:
        """Errors are printed even in quiet mode."""

        self.error_console.print(
            f"[red]error [{failure.code}]: {escape(failure.message)}[/red]"
            f" ({failure.stage.value} failed for {escape(target)})"
        )


__all__ = ["ResultDisplay"]
