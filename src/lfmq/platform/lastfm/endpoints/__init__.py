"""Endpoint descriptors and typed payloads for Last.fm user methods."""

from .base import DecodeOutcome, EndpointDescriptor, ShapeError
from .charts import ArtistRef, ChartAttributes, Image
from .top_albums import TOP_ALBUMS, Album, TopAlbums
from .top_artists import TOP_ARTISTS, Artist, TopArtists
from .top_tracks import TOP_TRACKS, TopTracks, Track
from .user_info import USER_INFO, UserInfo

__all__ = [
    "TOP_ALBUMS",
    "TOP_ARTISTS",
    "TOP_TRACKS",
    "USER_INFO",
    "Album",
    "Artist",
    "ArtistRef",
    "ChartAttributes",
    "DecodeOutcome",
    "EndpointDescriptor",
    "Image",
    "ShapeError",
    "TopAlbums",
    "TopArtists",
    "TopTracks",
    "Track",
    "UserInfo",
]
