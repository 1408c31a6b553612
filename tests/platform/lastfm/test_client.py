"""Tests for the client facade and its request builders."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from lfmq.config import settings
from lfmq.platform.lastfm import LastFMClient, Period, ServiceError
from lfmq.platform.lastfm.errors import ConfigError
from lfmq.platform.lastfm.http_client import LastFMHTTPClient
from lfmq.platform.lastfm.request import ChartRequest, RequestBuilder


def test_top_artists_scenario(fake_http: Callable[..., Any], top_artists_body: dict[str, Any]) -> None:
    http = fake_http(top_artists_body)

    result = LastFMClient(http).top_artists("LAST.HQ").with_limit(1).send()

    assert len(result.artists) == 1
    assert result.artists[0].name == "Radiohead"
    assert result.attrs.total == "50"


def test_user_not_found_scenario(fake_http: Callable[..., Any]) -> None:
    http = fake_http({"error": 6, "message": "User not found"})

    with pytest.raises(ServiceError) as excinfo:
        _ = LastFMClient(http).top_artists("LAST.HQ").with_limit(1).send()

    assert excinfo.value.code == 6


def test_factories_return_fresh_builders(fake_http: Callable[..., Any]) -> None:
    client = LastFMClient(fake_http("{}"))

    first = client.top_tracks("RJ")
    second = client.top_tracks("RJ")
    assert first is not second
    assert isinstance(first, ChartRequest)
    assert client.top_albums("RJ").method == "user.getTopAlbums"
    assert client.top_artists("RJ").with_period(Period.OVERALL).params["period"] == "overall"

    info = client.user_info("RJ")
    assert isinstance(info, RequestBuilder)
    assert not isinstance(info, ChartRequest)
    assert info.method == "user.getInfo"


def test_from_settings_uses_configured_transport(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "LASTFM_API_KEY", "configured-key")
    monkeypatch.setattr(settings, "LASTFM_API_ROOT", "https://lastfm.example.test/2.0/")
    monkeypatch.setattr(settings, "REQUEST_TIMEOUT_SECONDS", 7.5)

    client = LastFMClient.from_settings()

    assert isinstance(client.http, LastFMHTTPClient)
    assert client.http.api_root == "https://lastfm.example.test/2.0/"
    assert client.http.timeout == 7.5
    assert "api_key=configured-key" in client.http.build_url("user.getInfo", {"user": "RJ"})


def test_from_settings_without_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "LASTFM_API_KEY", "")

    with pytest.raises(ConfigError):
        _ = LastFMClient.from_settings()
