"""Command line interface for cwdswitch."""

import sys
from typing import final

from cwdswitch.config import ConfigError
from cwdswitch.platform.logging import logger
from cwdswitch.ui.cli.args import ArgumentParser
from cwdswitch.ui.cli.args.options import CLIArgs, ProbeArgs
from cwdswitch.ui.cli.commands import ProbeCommand, RunCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Exits the process with the command's exit code when it is non-zero.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            command: ProbeCommand | RunCommand = (
                ProbeCommand(args) if isinstance(args, ProbeArgs) else RunCommand(args)
            )
            exit_code = command.execute()
            if exit_code != 0:
                sys.exit(exit_code)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except ConfigError as e:
            print(f"cwdswitch: {e}", file=sys.stderr)
            sys.exit(2)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failing commands call
        ``sys.exit(...)`` so this return is only reached on success.
    """
    CommandProcessor.process_command()
    return 0
