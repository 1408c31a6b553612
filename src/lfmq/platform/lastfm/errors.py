"""Where: src/lfmq/platform/lastfm/errors.py
What: Failure taxonomy raised by Last.fm requests.
Why: Callers branch on the failure kind; no request ever yields a partial result.
"""

from __future__ import annotations

from enum import IntEnum

from lfmq.config.config import ConfigError


class ServiceErrorCode(IntEnum):
    """Error codes documented by the Last.fm web service."""

    INVALID_SERVICE = 2
    INVALID_METHOD = 3
    AUTHENTICATION_FAILED = 4
    INVALID_FORMAT = 5
    INVALID_PARAMETERS = 6
    INVALID_RESOURCE = 7
    OPERATION_FAILED = 8
    INVALID_SESSION_KEY = 9
    INVALID_API_KEY = 10
    SERVICE_OFFLINE = 11
    INVALID_METHOD_SIGNATURE = 13
    TEMPORARY_ERROR = 16
    LOGIN_REQUIRED = 17
    SUSPENDED_API_KEY = 26
    RATE_LIMIT_EXCEEDED = 29


class LastFMError(Exception):
    """Base class for every failure reported by a Last.fm request."""


class TransportError(LastFMError):
    """The request never produced a readable response body."""


class ServiceError(LastFMError):
    """The service answered with an error envelope instead of a payload."""

    code: int
    message: str

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"Last.fm error {code}: {message}")
        self.code = code
        self.message = message

    @property
    def known_code(self) -> ServiceErrorCode | None:
        """Return the documented error code, or ``None`` for codes Last.fm never listed."""

        try:
            return ServiceErrorCode(self.code)
        except ValueError:
            return None


class ParsingError(LastFMError):
    """The body matched neither the error envelope nor the endpoint payload.

    ``diagnostic`` explains why the payload shape was rejected and
    ``error_shape_diagnostic`` why the error envelope was rejected.
    """

    diagnostic: str
    error_shape_diagnostic: str | None

    def __init__(self, diagnostic: str, error_shape_diagnostic: str | None = None) -> None:
        super().__init__(diagnostic)
        self.diagnostic = diagnostic
        self.error_shape_diagnostic = error_shape_diagnostic

    def __str__(self) -> str:
        if self.error_shape_diagnostic:
            return f"{self.diagnostic} (not an error envelope: {self.error_shape_diagnostic})"
        return self.diagnostic


class RequestAlreadySentError(RuntimeError):
    """A request builder was used after ``send()``."""


__all__ = [
    "ConfigError",
    "LastFMError",
    "ParsingError",
    "RequestAlreadySentError",
    "ServiceError",
    "ServiceErrorCode",
    "TransportError",
]
