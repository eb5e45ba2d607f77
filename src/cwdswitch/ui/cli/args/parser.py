"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from typing import final

from cwdswitch.config import Config
from cwdswitch.platform.logging import DEFAULT_LOG_FILE, setup_logger
from cwdswitch.ui.cli.args.options import CLIArgs, ProbeArgs, RunArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="cwdswitch",
            description="cwdswitch - change the working directory and report where you came from.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        probe_parser = subparsers.add_parser(
            "probe",
            help="Switch into a directory and straight back, reporting the outcome",
        )
        _ = probe_parser.add_argument(
            "target",
            type=str,
            help="Directory to switch into",
            metavar="TARGET",
        )
        ArgumentParser._add_verbosity(probe_parser)

        run_parser = subparsers.add_parser(
            "run",
            help="Run a command with TARGET as the working directory",
        )
        _ = run_parser.add_argument(
            "target",
            type=str,
            help="Directory to run the command in",
            metavar="TARGET",
        )
        ArgumentParser._add_verbosity(run_parser)
        _ = run_parser.add_argument(
            "argv",
            nargs=argparse.REMAINDER,
            help="Command and arguments, optionally after '--'",
            metavar="COMMAND",
        )

        return parser

    @staticmethod
    def _add_verbosity(parser: argparse.ArgumentParser) -> None:
        group = parser.add_mutually_exclusive_group()
        _ = group.add_argument(
            "--verbose",
            action="store_true",
            help="Show every directory transition",
        )
        _ = group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments and configure logging.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the arguments are invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        configuration = Config.load()
        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = configuration.console_log_level

        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        if parsed_args.command == "probe":
            return ProbeArgs(
                command="probe",
                target=parsed_args.target,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        argv: list[str] = list(parsed_args.argv)
        if argv and argv[0] == "--":
            argv = argv[1:]
        if not argv:
            parser.error("run requires a COMMAND to execute")

        return RunArgs(
            command="run",
            target=parsed_args.target,
            argv=argv,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
