"""Where: src/lfmq/platform/lastfm/client.py
What: Facade handing out endpoint request builders over one shared transport.
Why: Callers pick an endpoint by name and never assemble requests by hand.
"""

from __future__ import annotations

from lfmq.config import settings

from .endpoints import (
    TOP_ALBUMS,
    TOP_ARTISTS,
    TOP_TRACKS,
    USER_INFO,
    TopAlbums,
    TopArtists,
    TopTracks,
    UserInfo,
)
from .http_client import HTTPClient, LastFMHTTPClient
from .request import ChartRequest, RequestBuilder


class LastFMClient:
    """Entry point for Last.fm user queries.

    Example:
        >>> client = LastFMClient.from_settings()
        >>> top = client.top_artists("LAST.HQ").with_limit(5).send()
    """

    def __init__(self, http: HTTPClient) -> None:
        self.http: HTTPClient = http

    @classmethod
    def from_settings(cls, api_key: str | None = None) -> "LastFMClient":
        """Build a client from configuration; raises ``ConfigError`` without an API key."""

        http = LastFMHTTPClient(
            api_key if api_key is not None else settings.LASTFM_API_KEY,
            api_root=settings.LASTFM_API_ROOT,
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
        )
        return cls(http)

    def top_artists(self, user: str) -> ChartRequest[TopArtists]:
        return ChartRequest(self.http, TOP_ARTISTS, user=user)

    def top_tracks(self, user: str) -> ChartRequest[TopTracks]:
        return ChartRequest(self.http, TOP_TRACKS, user=user)

    def top_albums(self, user: str) -> ChartRequest[TopAlbums]:
        return ChartRequest(self.http, TOP_ALBUMS, user=user)

    def user_info(self, user: str) -> RequestBuilder[UserInfo]:
        return RequestBuilder(self.http, USER_INFO, user=user)


__all__ = ["LastFMClient"]
