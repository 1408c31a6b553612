"""src/lfmq/ui/cli/commands/query.py
What: Execute chart and profile queries for the CLI.
Why: Translate parsed arguments into request builder calls.
"""

from __future__ import annotations

from typing import final

from lfmq.platform.lastfm import LastFMClient, UserInfo
from lfmq.platform.lastfm.request import ChartRequest
from lfmq.ui.cli.args.options import ChartArgs, InfoArgs
from lfmq.ui.cli.display import ChartDisplay
from lfmq.ui.cli.display.charts import ChartPayload


@final
class ChartCommand:
    """Run one of the ``top-*`` subcommands."""

    def __init__(
        self,
        args: ChartArgs,
        client: LastFMClient | None = None,
        display: ChartDisplay | None = None,
    ) -> None:
        self.args = args
        self.client = client or LastFMClient.from_settings()
        self.display = display or ChartDisplay()

    def build_request(self) -> ChartRequest[ChartPayload]:
        """Create the builder for the selected chart with the requested options."""

        factories = {
            "top-artists": self.client.top_artists,
            "top-tracks": self.client.top_tracks,
            "top-albums": self.client.top_albums,
        }
        request = factories[self.args.command](self.args.user)
        if self.args.limit is not None:
            request = request.with_limit(self.args.limit)
        if self.args.page is not None:
            request = request.with_page(self.args.page)
        if self.args.period is not None:
            request = request.with_period(self.args.period)
        return request

    def execute(self) -> ChartPayload:
        payload = self.build_request().send()
        self.display.show(payload, quiet=self.args.quiet)
        return payload


@final
class InfoCommand:
    """Run the ``info`` subcommand."""

    def __init__(
        self,
        args: InfoArgs,
        client: LastFMClient | None = None,
        display: ChartDisplay | None = None,
    ) -> None:
        self.args = args
        self.client = client or LastFMClient.from_settings()
        self.display = display or ChartDisplay()

    def execute(self) -> UserInfo:
        info = self.client.user_info(self.args.user).send()
        self.display.show(info, quiet=self.args.quiet)
        return info
