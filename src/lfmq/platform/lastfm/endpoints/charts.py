"""Where: src/lfmq/platform/lastfm/endpoints/charts.py
What: Structures shared by the user chart payloads (images, ranks, paging).
Why: Top artists, tracks and albums all carry the same attribute block.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .base import optional_str, require_list, require_object, require_str


@dataclass(slots=True, frozen=True)
class Image:
    """One artwork rendition as listed by Last.fm."""

    size: str
    url: str


@dataclass(slots=True, frozen=True)
class ChartAttributes:
    """Paging block of a chart response.

    Values stay strings exactly as the service formats them.
    """

    page: str
    total: str
    user: str
    per_page: str
    total_pages: str


@dataclass(slots=True, frozen=True)
class ArtistRef:
    """Artist reference embedded in track and album chart entries."""

    name: str
    mbid: str
    url: str


def decode_images(node: Mapping[str, Any], path: str) -> tuple[Image, ...]:
    images: list[Image] = []
    for index, entry in enumerate(require_list(node, "image", path)):
        entry_path = f"{path}.image[{index}]"
        images.append(
            Image(size=require_str(entry, "size", entry_path), url=require_str(entry, "#text", entry_path))
        )
    return tuple(images)


def decode_rank(node: Mapping[str, Any], path: str) -> str:
    attrs = require_object(node, "@attr", path)
    return require_str(attrs, "rank", f"{path}.@attr")


def decode_chart_attributes(node: Mapping[str, Any], path: str) -> ChartAttributes:
    attrs = require_object(node, "@attr", path)
    attrs_path = f"{path}.@attr"
    return ChartAttributes(
        page=require_str(attrs, "page", attrs_path),
        total=require_str(attrs, "total", attrs_path),
        user=require_str(attrs, "user", attrs_path),
        per_page=require_str(attrs, "perPage", attrs_path),
        total_pages=require_str(attrs, "totalPages", attrs_path),
    )


def decode_artist_ref(node: Mapping[str, Any], path: str) -> ArtistRef:
    artist = require_object(node, "artist", path)
    artist_path = f"{path}.artist"
    return ArtistRef(
        name=require_str(artist, "name", artist_path),
        mbid=optional_str(artist, "mbid", artist_path),
        url=require_str(artist, "url", artist_path),
    )


__all__ = [
    "ArtistRef",
    "ChartAttributes",
    "Image",
    "decode_artist_ref",
    "decode_chart_attributes",
    "decode_images",
    "decode_rank",
]
