"""Command execution package for CLI."""

from cwdswitch.ui.cli.commands.executor import CommandExecutor
from cwdswitch.ui.cli.commands.probe import ProbeCommand
from cwdswitch.ui.cli.commands.run import RunCommand

__all__ = [
    "CommandExecutor",
    "ProbeCommand",
    "RunCommand",
]
