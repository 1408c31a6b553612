"""Tests for the requests-backed Last.fm transport."""

from __future__ import annotations

from urllib.parse import parse_qsl, urlsplit

import pytest
import requests
from pytest_mock import MockerFixture

from lfmq.platform.lastfm.errors import ConfigError, TransportError
from lfmq.platform.lastfm.http_client import LastFMHTTPClient

API_ROOT = "https://ws.audioscrobbler.com/2.0/"


def _client(timeout: float = 15.0) -> LastFMHTTPClient:
    return LastFMHTTPClient("secret-key", api_root=API_ROOT, timeout=timeout, user_agent="lfmq-tests/1.0")


def test_build_url_adds_credentials_and_format() -> None:
    url = _client().build_url("user.getTopArtists", {"user": "LAST.HQ", "limit": "1", "period": "7day"})

    parts = urlsplit(url)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == API_ROOT
    assert parse_qsl(parts.query) == [
        ("method", "user.getTopArtists"),
        ("user", "LAST.HQ"),
        ("limit", "1"),
        ("period", "7day"),
        ("api_key", "secret-key"),
        ("format", "json"),
    ]


def test_build_url_ignores_reserved_keys_from_params() -> None:
    url = _client().build_url("user.getInfo", {"user": "RJ", "api_key": "other", "method": "x"})

    query = dict(parse_qsl(urlsplit(url).query))
    assert query["api_key"] == "secret-key"
    assert query["method"] == "user.getInfo"


def test_blank_api_key_is_a_config_error() -> None:
    with pytest.raises(ConfigError):
        _ = LastFMHTTPClient("   ", api_root=API_ROOT, timeout=5.0)


def test_perform_request_returns_raw_body(mocker: MockerFixture) -> None:
    response = mocker.Mock(status_code=200, content=b'{"ok": true}')
    get = mocker.patch("lfmq.platform.lastfm.http_client.requests.get", return_value=response)

    body = _client(timeout=3.0).perform_request("https://example.test/")

    assert body == b'{"ok": true}'
    get.assert_called_once()
    assert get.call_args.kwargs["timeout"] == (3.0, 3.0)
    assert get.call_args.kwargs["headers"]["User-Agent"] == "lfmq-tests/1.0"


def test_error_status_with_body_is_passed_through(mocker: MockerFixture) -> None:
    payload = b'{"error": 10, "message": "Invalid API key"}'
    response = mocker.Mock(status_code=403, content=payload)
    _ = mocker.patch("lfmq.platform.lastfm.http_client.requests.get", return_value=response)

    assert _client().perform_request("https://example.test/") == payload


def test_error_status_without_body_is_a_transport_error(mocker: MockerFixture) -> None:
    response = mocker.Mock(status_code=502, content=b"")
    _ = mocker.patch("lfmq.platform.lastfm.http_client.requests.get", return_value=response)

    with pytest.raises(TransportError, match="HTTP 502"):
        _ = _client().perform_request("https://example.test/")


def test_connection_failures_are_transport_errors(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "lfmq.platform.lastfm.http_client.requests.get",
        side_effect=requests.ConnectionError("no route to host"),
    )

    with pytest.raises(TransportError, match="no route to host"):
        _ = _client().perform_request("https://example.test/")
