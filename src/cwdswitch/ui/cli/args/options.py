"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final


@final
@dataclass(slots=True)
class ProbeArgs:
    """Command line arguments for the ``probe`` subcommand."""

    command: Literal["probe"]
    target: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class RunArgs:
    """Command line arguments for the ``run`` subcommand."""

    command: Literal["run"]
    target: str
    argv: list[str]
    verbose: bool
    quiet: bool


CLIArgs = ProbeArgs | RunArgs

__all__ = ["CLIArgs", "ProbeArgs", "RunArgs"]
