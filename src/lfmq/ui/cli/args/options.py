"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from lfmq.platform.lastfm import Period

ChartCommandName = Literal["top-artists", "top-tracks", "top-albums"]


@final
@dataclass(slots=True)
class ChartArgs:
    """Command line arguments for the chart subcommands."""

    command: ChartCommandName
    user: str
    limit: int | None
    page: int | None
    period: Period | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class InfoArgs:
    """Command line arguments for the ``info`` subcommand."""

    command: Literal["info"]
    user: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ConfigArgs:
    """Command line arguments for the ``config`` subcommand."""

    command: Literal["config"]
    api_key: str | None
    contact: str | None
    show: bool


CLIArgs = ChartArgs | InfoArgs | ConfigArgs

__all__ = ["CLIArgs", "ChartArgs", "ChartCommandName", "ConfigArgs", "InfoArgs"]
