"""Where: src/lfmq/platform/lastfm/http_client.py
What: ``requests``-backed transport that signs URLs and fetches raw bodies.
Why: Keep credentials and network concerns out of the request builders.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final, Protocol
from urllib.parse import urlencode

import requests

from lfmq.platform.logging import logger

from .errors import ConfigError, TransportError
from .user_agent import default_user_agent

# Query keys owned by the transport; builders may not override them.
RESERVED_PARAMS: Final[frozenset[str]] = frozenset({"method", "api_key", "format"})

_CONNECT_TIMEOUT_SECONDS: Final[float] = 5.0


class HTTPClient(Protocol):
    """What request builders need from a transport."""

    def build_url(self, method: str, params: Mapping[str, str]) -> str:
        """Return the full request URL including credentials."""
        ...

    def perform_request(self, url: str) -> bytes:
        """GET ``url`` and return the raw body, raising ``TransportError`` on failure."""
        ...


class LastFMHTTPClient:
    """Stateless Last.fm transport; one instance can serve concurrent builders."""

    def __init__(
        self,
        api_key: str,
        *,
        api_root: str,
        timeout: float,
        user_agent: str | None = None,
    ) -> None:
        if not api_key.strip():
            raise ConfigError("A Last.fm API key is required (set LASTFM_API_KEY or api_key in config)")
        self._api_key: str = api_key.strip()
        self.api_root: str = api_root
        self.timeout: float = timeout
        self.user_agent: str = user_agent or default_user_agent()

    def build_url(self, method: str, params: Mapping[str, str]) -> str:
        query: dict[str, str] = {"method": method}
        query.update({key: value for key, value in params.items() if key not in RESERVED_PARAMS})
        query["api_key"] = self._api_key
        query["format"] = "json"
        return f"{self.api_root}?{urlencode(query)}"

    def perform_request(self, url: str) -> bytes:
        headers = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        try:
            response = requests.get(
                url,
                headers=headers,
                timeout=(min(_CONNECT_TIMEOUT_SECONDS, self.timeout), self.timeout),
            )
        except requests.RequestException as exc:
            raise TransportError(f"Last.fm request failed: {exc}") from exc

        status = int(response.status_code)
        body = response.content
        if not 200 <= status < 300:
            # Last.fm ships its error envelope with 4xx/5xx statuses too.
            logger.debug("Last.fm HTTP status %s (%d bytes)", status, len(body))
            if not body.strip():
                raise TransportError(f"Last.fm returned HTTP {status} with an empty body")
        return body


__all__ = ["HTTPClient", "LastFMHTTPClient", "RESERVED_PARAMS"]
