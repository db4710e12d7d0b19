"""Command line interface for lastfmapi."""

import sys
from typing import final

from lastfmapi.platform.lastfm.errors import LastFMError
from lastfmapi.platform.logging import logger
from lastfmapi.ui.cli.args import ArgumentParser
from lastfmapi.ui.cli.args.options import CallArgs, CLIArgs, ConfigInitArgs, SearchArgs
from lastfmapi.ui.cli.commands import CallCommand, ConfigInitCommand, SearchCommand


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

            if isinstance(args, SearchArgs):
                SearchCommand(args).execute()
                return

            if isinstance(args, CallArgs):
                CallCommand(args).execute()
                return

            assert isinstance(args, ConfigInitArgs)
            if not ConfigInitCommand(args).execute():
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except LastFMError as e:
            logger.error("%s", e)
            sys.exit(1)
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
