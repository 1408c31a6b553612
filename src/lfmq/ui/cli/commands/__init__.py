"""Command executors for the CLI."""

from lfmq.ui.cli.commands.config import ConfigCommand
from lfmq.ui.cli.commands.query import ChartCommand, InfoCommand

__all__ = ["ChartCommand", "ConfigCommand", "InfoCommand"]
