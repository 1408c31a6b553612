"""Shared pytest fixtures: sample Last.fm bodies and an in-memory transport."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from typing import Any

import pytest

TOP_ARTISTS_BODY: dict[str, Any] = {
    "topartists": {
        "artist": [
            {
                "@attr": {"rank": "1"},
                "mbid": "a74b1b7f-71a5-4011-9441-d0b5e4122711",
                "playcount": "2016",
                "name": "Radiohead",
                "url": "https://www.last.fm/music/Radiohead",
                "image": [
                    {"size": "small", "#text": "http://img.example/small.png"},
                    {"size": "large", "#text": "http://img.example/large.png"},
                ],
            }
        ],
        "@attr": {
            "page": "1",
            "total": "50",
            "user": "LAST.HQ",
            "perPage": "10",
            "totalPages": "5",
        },
    }
}

ERROR_BODY: dict[str, Any] = {"error": 6, "message": "User not found"}


class FakeHTTPClient:
    """Transport double recording every call and replaying a fixed body."""

    def __init__(self, body: bytes | str | Exception) -> None:
        self.body = body
        self.built: list[tuple[str, dict[str, str]]] = []
        self.requested: list[str] = []

    def build_url(self, method: str, params: Mapping[str, str]) -> str:
        self.built.append((method, dict(params)))
        return f"https://ws.example.test/2.0/?method={method}"

    def perform_request(self, url: str) -> bytes:
        self.requested.append(url)
        if isinstance(self.body, Exception):
            raise self.body
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body


@pytest.fixture
def top_artists_body() -> dict[str, Any]:
    return json.loads(json.dumps(TOP_ARTISTS_BODY))


@pytest.fixture
def error_body() -> dict[str, Any]:
    return dict(ERROR_BODY)


@pytest.fixture
def fake_http() -> Callable[[bytes | str | Exception | dict[str, Any]], FakeHTTPClient]:
    """Build a ``FakeHTTPClient``; dict bodies are serialized to JSON."""

    def _factory(body: bytes | str | Exception | dict[str, Any]) -> FakeHTTPClient:
        if isinstance(body, dict):
            return FakeHTTPClient(json.dumps(body))
        return FakeHTTPClient(body)

    return _factory
