"""Command line interface for appicon."""

import sys
from typing import final

from appicon.features.export import ApplicationLookupError
from appicon.platform.logging import logger
from appicon.ui.cli.args import ArgumentParser
from appicon.ui.cli.args.options import CLIArgs, CopyArgs, ExportArgs, ListArgs, RevealArgs
from appicon.ui.cli.commands import CopyCommand, ExportCommand, ListCommand, RevealCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ListArgs):
                _ = ListCommand(args).execute()
                return

            if isinstance(args, ExportArgs):
                if ExportCommand(args).execute() is None:
                    sys.exit(1)
                return

            if isinstance(args, CopyArgs):
                if not CopyCommand(args).execute():
                    sys.exit(1)
                return

            assert isinstance(args, RevealArgs)
            if not RevealCommand(args).execute():
                sys.exit(1)
            return

        except ApplicationLookupError as e:
            logger.error("%s", e)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
