"""Command line interface package; ``main`` is the console script target."""

from lfmq.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
