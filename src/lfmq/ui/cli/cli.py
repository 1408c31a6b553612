"""Command line interface for lfmq."""

import sys
from typing import final

from lfmq.platform.lastfm import ConfigError, LastFMError, ServiceError
from lfmq.platform.logging import logger
from lfmq.ui.cli.args import ArgumentParser
from lfmq.ui.cli.args.options import CLIArgs, ChartArgs, InfoArgs
from lfmq.ui.cli.commands import ChartCommand, ConfigCommand, InfoCommand


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

            if isinstance(args, ChartArgs):
                _ = ChartCommand(args).execute()
                return

            if isinstance(args, InfoArgs):
                _ = InfoCommand(args).execute()
                return

            _ = ConfigCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except ConfigError as e:
            logger.error("%s", e)
            sys.exit(2)
        except ServiceError as e:
            logger.error("Last.fm rejected the request (error %s): %s", e.code, e.message)
            sys.exit(1)
        except LastFMError as e:
            logger.error("Last.fm request failed: %s", e)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
