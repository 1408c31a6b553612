"""Where: src/lfmq/platform/lastfm/endpoints/top_artists.py
What: ``user.getTopArtists`` descriptor and payload types.
Why: A user's most played artists, one page at a time.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

from .base import EndpointDescriptor, require_list, require_str
from .charts import ChartAttributes, Image, decode_chart_attributes, decode_images, decode_rank


@dataclass(slots=True, frozen=True)
class Artist:
    rank: str
    mbid: str
    playcount: str
    name: str
    url: str
    images: tuple[Image, ...]


@dataclass(slots=True, frozen=True)
class TopArtists:
    """A page of the user's top artists plus its paging attributes."""

    artists: tuple[Artist, ...]
    attrs: ChartAttributes


def _decode_artist(node: Mapping[str, Any], path: str) -> Artist:
    return Artist(
        rank=decode_rank(node, path),
        mbid=require_str(node, "mbid", path),
        playcount=require_str(node, "playcount", path),
        name=require_str(node, "name", path),
        url=require_str(node, "url", path),
        images=decode_images(node, path),
    )


def decode_top_artists(node: Mapping[str, Any], path: str) -> TopArtists:
    entries = require_list(node, "artist", path)
    return TopArtists(
        artists=tuple(
            _decode_artist(entry, f"{path}.artist[{index}]") for index, entry in enumerate(entries)
        ),
        attrs=decode_chart_attributes(node, path),
    )


TOP_ARTISTS: Final[EndpointDescriptor[TopArtists]] = EndpointDescriptor(
    method="user.getTopArtists",
    envelope_key="topartists",
    identifying_params=("user",),
    decode_payload=decode_top_artists,
)


__all__ = ["Artist", "TOP_ARTISTS", "TopArtists", "decode_top_artists"]
