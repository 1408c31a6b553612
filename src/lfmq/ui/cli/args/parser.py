"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from lfmq.config.config import Config
from lfmq.platform.lastfm import Period
from lfmq.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from lfmq.ui.cli.args.options import CLIArgs, ChartArgs, ConfigArgs, InfoArgs

CHART_COMMANDS: tuple[str, ...] = ("top-artists", "top-tracks", "top-albums")


def _period_arg(value: str) -> Period:
    try:
        return Period.from_user_input(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


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
            description="lfmq - query a Last.fm user's charts and profile.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        for command, subject in zip(CHART_COMMANDS, ("artists", "tracks", "albums")):
            chart_parser = subparsers.add_parser(
                command,
                help=f"Show a user's most played {subject}",
            )
            ArgumentParser._configure_chart_parser(chart_parser)

        info_parser = subparsers.add_parser(
            "info",
            help="Show a user's public profile",
        )
        _ = info_parser.add_argument("user", type=str, help="Last.fm user name", metavar="USER")
        ArgumentParser._add_verbosity_flags(info_parser)

        config_parser = subparsers.add_parser(
            "config",
            help="Store the API key and contact used for requests",
        )
        _ = config_parser.add_argument(
            "--api-key",
            type=str,
            help="Last.fm API key to persist in the config file",
        )
        _ = config_parser.add_argument(
            "--contact",
            type=str,
            help="Contact URL or e-mail sent in the User-Agent header",
        )
        _ = config_parser.add_argument(
            "--show",
            action="store_true",
            help="Print the effective configuration",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If argument validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command in CHART_COMMANDS:
            return ChartArgs(
                command=parsed_args.command,
                user=parsed_args.user,
                limit=parsed_args.limit,
                page=parsed_args.page,
                period=parsed_args.period,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "info":
            return InfoArgs(command="info", user=parsed_args.user, verbose=is_verbose, quiet=is_quiet)

        if command == "config":
            return ConfigArgs(
                command="config",
                api_key=parsed_args.api_key,
                contact=parsed_args.contact,
                show=bool(parsed_args.show),
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _configure_chart_parser(parser: argparse.ArgumentParser) -> None:
        """Apply shared configuration for chart subparsers."""

        _ = parser.add_argument("user", type=str, help="Last.fm user name", metavar="USER")
        _ = parser.add_argument(
            "--limit",
            type=int,
            help="Number of entries per page (service default applies when omitted)",
        )
        _ = parser.add_argument(
            "--page",
            type=int,
            help="Page number to fetch",
        )
        _ = parser.add_argument(
            "--period",
            type=_period_arg,
            help="Time window: overall, 7day, 1month, 3month, 6month, 12month",
            metavar="PERIOD",
        )
        ArgumentParser._add_verbosity_flags(parser)

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show request tracing",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
