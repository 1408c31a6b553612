"""Command line argument handling package."""

from lfmq.ui.cli.args.parser import ArgumentParser
from lfmq.ui.cli.args.options import CLIArgs, ChartArgs, ConfigArgs, InfoArgs

__all__ = ["ArgumentParser", "CLIArgs", "ChartArgs", "ConfigArgs", "InfoArgs"]
