"""Last.fm web service binding.

This package builds parameterized queries for Last.fm's read-only user
methods, sends them through a shared transport and decodes the JSON body
into typed payloads or typed failures.
"""

from .client import LastFMClient
from .endpoints import (
    Album,
    Artist,
    ArtistRef,
    ChartAttributes,
    Image,
    TopAlbums,
    TopArtists,
    TopTracks,
    Track,
    UserInfo,
)
from .errors import (
    ConfigError,
    LastFMError,
    ParsingError,
    RequestAlreadySentError,
    ServiceError,
    ServiceErrorCode,
    TransportError,
)
from .http_client import HTTPClient, LastFMHTTPClient
from .params import Period
from .request import BuilderState, ChartRequest, RequestBuilder, RequestSpec

__all__ = [
    "Album",
    "Artist",
    "ArtistRef",
    "BuilderState",
    "ChartAttributes",
    "ChartRequest",
    "ConfigError",
    "HTTPClient",
    "Image",
    "LastFMClient",
    "LastFMError",
    "LastFMHTTPClient",
    "ParsingError",
    "Period",
    "RequestAlreadySentError",
    "RequestBuilder",
    "RequestSpec",
    "ServiceError",
    "ServiceErrorCode",
    "TopAlbums",
    "TopArtists",
    "TopTracks",
    "Track",
    "TransportError",
    "UserInfo",
]
