"""Where: src/lfmq/platform/lastfm/endpoints/top_albums.py
What: ``user.getTopAlbums`` descriptor and payload types.
Why: A user's most played albums, one page at a time.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

from .base import EndpointDescriptor, optional_str, require_list, require_str
from .charts import (
    ArtistRef,
    ChartAttributes,
    Image,
    decode_artist_ref,
    decode_chart_attributes,
    decode_images,
    decode_rank,
)


@dataclass(slots=True, frozen=True)
class Album:
    rank: str
    mbid: str
    playcount: str
    name: str
    url: str
    artist: ArtistRef
    images: tuple[Image, ...]


@dataclass(slots=True, frozen=True)
class TopAlbums:
    """A page of the user's top albums plus its paging attributes."""

    albums: tuple[Album, ...]
    attrs: ChartAttributes


def _decode_album(node: Mapping[str, Any], path: str) -> Album:
    return Album(
        rank=decode_rank(node, path),
        mbid=optional_str(node, "mbid", path),
        playcount=require_str(node, "playcount", path),
        name=require_str(node, "name", path),
        url=require_str(node, "url", path),
        artist=decode_artist_ref(node, path),
        images=decode_images(node, path),
    )


def decode_top_albums(node: Mapping[str, Any], path: str) -> TopAlbums:
    entries = require_list(node, "album", path)
    return TopAlbums(
        albums=tuple(
            _decode_album(entry, f"{path}.album[{index}]") for index, entry in enumerate(entries)
        ),
        attrs=decode_chart_attributes(node, path),
    )


TOP_ALBUMS: Final[EndpointDescriptor[TopAlbums]] = EndpointDescriptor(
    method="user.getTopAlbums",
    envelope_key="topalbums",
    identifying_params=("user",),
    decode_payload=decode_top_albums,
)


__all__ = ["Album", "TOP_ALBUMS", "TopAlbums", "decode_top_albums"]
