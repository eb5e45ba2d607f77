"""Command line interface package."""

from cwdswitch.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
