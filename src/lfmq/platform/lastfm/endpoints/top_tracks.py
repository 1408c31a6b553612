"""Where: src/lfmq/platform/lastfm/endpoints/top_tracks.py
What: ``user.getTopTracks`` descriptor and payload types.
Why: A user's most played tracks, one page at a time.
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
class Track:
    rank: str
    mbid: str
    playcount: str
    name: str
    url: str
    duration: str
    artist: ArtistRef
    images: tuple[Image, ...]


@dataclass(slots=True, frozen=True)
class TopTracks:
    """A page of the user's top tracks plus its paging attributes."""

    tracks: tuple[Track, ...]
    attrs: ChartAttributes


def _decode_track(node: Mapping[str, Any], path: str) -> Track:
    return Track(
        rank=decode_rank(node, path),
        mbid=optional_str(node, "mbid", path),
        playcount=require_str(node, "playcount", path),
        name=require_str(node, "name", path),
        url=require_str(node, "url", path),
        duration=optional_str(node, "duration", path, default="0"),
        artist=decode_artist_ref(node, path),
        images=decode_images(node, path),
    )


def decode_top_tracks(node: Mapping[str, Any], path: str) -> TopTracks:
    entries = require_list(node, "track", path)
    return TopTracks(
        tracks=tuple(
            _decode_track(entry, f"{path}.track[{index}]") for index, entry in enumerate(entries)
        ),
        attrs=decode_chart_attributes(node, path),
    )


TOP_TRACKS: Final[EndpointDescriptor[TopTracks]] = EndpointDescriptor(
    method="user.getTopTracks",
    envelope_key="toptracks",
    identifying_params=("user",),
    decode_payload=decode_top_tracks,
)


__all__ = ["TOP_TRACKS", "TopTracks", "Track", "decode_top_tracks"]
