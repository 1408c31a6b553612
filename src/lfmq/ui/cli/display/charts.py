"""src/lfmq/ui/cli/display/charts.py
What: Render chart pages and user profiles as Rich tables.
Why: Keep console formatting out of the command executors.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import final

from rich.console import Console
from rich.table import Table

from lfmq.platform.lastfm import ChartAttributes, TopAlbums, TopArtists, TopTracks, UserInfo

ChartPayload = TopArtists | TopTracks | TopAlbums


@final
class ChartDisplay:
    """Handles payload display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show(self, payload: ChartPayload | UserInfo, quiet: bool = False) -> None:
        """Render any supported payload.

        Args:
            payload: Decoded response to render.
            quiet: Whether to suppress output.
        """
        if quiet:
            return

        if isinstance(payload, TopArtists):
            self._show_top_artists(payload)
        elif isinstance(payload, TopTracks):
            self._show_top_tracks(payload)
        elif isinstance(payload, TopAlbums):
            self._show_top_albums(payload)
        else:
            self._show_user_info(payload)

    def _show_top_artists(self, payload: TopArtists) -> None:
        table = Table(title=f"Top artists for {payload.attrs.user}")
        table.add_column("#", justify="right")
        table.add_column("Artist")
        table.add_column("Plays", justify="right")
        for artist in payload.artists:
            table.add_row(artist.rank, artist.name, artist.playcount)
        self.console.print(table)
        self._show_paging(payload.attrs)

    def _show_top_tracks(self, payload: TopTracks) -> None:
        table = Table(title=f"Top tracks for {payload.attrs.user}")
        table.add_column("#", justify="right")
        table.add_column("Track")
        table.add_column("Artist")
        table.add_column("Plays", justify="right")
        for track in payload.tracks:
            table.add_row(track.rank, track.name, track.artist.name, track.playcount)
        self.console.print(table)
        self._show_paging(payload.attrs)

    def _show_top_albums(self, payload: TopAlbums) -> None:
        table = Table(title=f"Top albums for {payload.attrs.user}")
        table.add_column("#", justify="right")
        table.add_column("Album")
        table.add_column("Artist")
        table.add_column("Plays", justify="right")
        for album in payload.albums:
            table.add_row(album.rank, album.name, album.artist.name, album.playcount)
        self.console.print(table)
        self._show_paging(payload.attrs)

    def _show_paging(self, attrs: ChartAttributes) -> None:
        self.console.print(
            f"Page {attrs.page}/{attrs.total_pages} ({attrs.per_page} per page, {attrs.total} total)"
        )

    def _show_user_info(self, info: UserInfo) -> None:
        table = Table(title=f"Last.fm user {info.name}", show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        if info.realname:
            table.add_row("Name", info.realname)
        if info.country:
            table.add_row("Country", info.country)
        table.add_row("Scrobbles", info.playcount)
        table.add_row("Registered", self._format_unixtime(info.registered_unixtime))
        table.add_row("Profile", info.url)
        self.console.print(table)

    @staticmethod
    def _format_unixtime(value: str) -> str:
        """Render a unix timestamp string as a UTC date, keeping unparsable input as is."""

        if not value.isdigit():
            return value
        return datetime.fromtimestamp(int(value), tz=timezone.utc).strftime("%Y-%m-%d")
