"""Command line argument handling package."""

from cwdswitch.ui.cli.args.options import CLIArgs, ProbeArgs, RunArgs
from cwdswitch.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "ProbeArgs", "RunArgs"]
