"""Where: src/lfmq/platform/lastfm/request.py
What: Single-use request builders that collect parameters and send once.
Why: Separate parameter accumulation from execution so callers can chain
     options and the network is only touched on ``send()``.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Generic, Self, TypeVar

from lfmq.platform.logging import logger

from . import params as query
from .endpoints.base import EndpointDescriptor
from .errors import LastFMError, ParsingError, RequestAlreadySentError, ServiceError, TransportError
from .http_client import RESERVED_PARAMS, HTTPClient
from .params import ParamValue, Period, QueryParam
from .resolver import resolve_response

T = TypeVar("T")


class BuilderState(str, Enum):
    """Lifecycle of a request builder."""

    BUILDING = "building"
    SENT = "sent"


@dataclass(slots=True)
class RequestSpec:
    """Method name plus query parameters in insertion order.

    Setting an existing key replaces its value in place.
    """

    method: str
    params: dict[str, str] = field(default_factory=dict)

    def set(self, key: str, value: str) -> None:
        self.params[key] = value

    def snapshot(self) -> Mapping[str, str]:
        """Read-only copy of the current parameters."""

        return MappingProxyType(dict(self.params))


class RequestBuilder(Generic[T]):
    """Collect parameters for one endpoint and send them exactly once.

    The HTTP client is borrowed for the duration of ``send()`` only and may be
    shared by any number of builders.
    """

    def __init__(
        self,
        http: HTTPClient,
        descriptor: EndpointDescriptor[T],
        **identifying: str,
    ) -> None:
        expected = set(descriptor.identifying_params)
        missing = sorted(expected - identifying.keys())
        unexpected = sorted(identifying.keys() - expected)
        if missing or unexpected:
            msg = (
                f"{descriptor.method} requires parameters {sorted(expected)}; "
                f"missing={missing} unexpected={unexpected}"
            )
            raise ValueError(msg)

        self._http: HTTPClient = http
        self._descriptor: EndpointDescriptor[T] = descriptor
        self._spec: RequestSpec = RequestSpec(method=descriptor.method)
        for name in descriptor.identifying_params:
            self._spec.set(name, identifying[name])
        self._state: BuilderState = BuilderState.BUILDING

    @property
    def method(self) -> str:
        return self._descriptor.method

    @property
    def state(self) -> BuilderState:
        return self._state

    @property
    def params(self) -> Mapping[str, str]:
        return self._spec.snapshot()

    def _ensure_building(self) -> None:
        if self._state is BuilderState.SENT:
            raise RequestAlreadySentError(f"{self.method} request was already sent")

    def set_param(self, key: str, value: ParamValue) -> Self:
        """Encode ``value`` and store it under ``key``, replacing any earlier value."""

        return self.with_param((key, query.encode_value(value)))

    def with_param(self, param: QueryParam) -> Self:
        """Store an already encoded ``(key, value)`` pair."""

        self._ensure_building()
        key, value = param
        if key in RESERVED_PARAMS or key in self._descriptor.identifying_params:
            raise ValueError(f"Parameter '{key}' is fixed for {self.method} requests")
        self._spec.set(key, value)
        return self

    def send(self) -> T:
        """Perform the request and decode the response.

        Raises:
            RequestAlreadySentError: ``send()`` was already called on this builder.
            TransportError: The service could not be reached or read.
            ServiceError: Last.fm reported an error for the request.
            ParsingError: The response matched neither the payload nor the error shape.
        """

        self._ensure_building()
        self._state = BuilderState.SENT

        params = dict(self._spec.params)
        logger.debug(
            "Requesting %s",
            self.method,
            extra={"request_event": "request.send", "method": self.method, "params": params},
        )
        started = time.perf_counter()
        try:
            url = self._http.build_url(self.method, params)
            body = self._http.perform_request(url)
            result = resolve_response(body, self._descriptor)
        except LastFMError as exc:
            self._log_failure(exc, started)
            raise

        logger.debug(
            "Received %s",
            self.method,
            extra={
                "request_event": "request.success",
                "method": self.method,
                "duration_ms": (time.perf_counter() - started) * 1000,
            },
        )
        return result

    def _log_failure(self, exc: LastFMError, started: float) -> None:
        extra: dict[str, object] = {
            "method": self.method,
            "duration_ms": (time.perf_counter() - started) * 1000,
            "error_message": str(exc),
        }
        if isinstance(exc, ServiceError):
            extra["request_event"] = "request.service_error"
            extra["error_code"] = exc.code
            extra["error_message"] = exc.message
        elif isinstance(exc, ParsingError):
            extra["request_event"] = "request.parsing_error"
        elif isinstance(exc, TransportError):
            extra["request_event"] = "request.transport_error"
        logger.warning("%s failed: %s", self.method, exc, extra=extra)


class ChartRequest(RequestBuilder[T]):
    """Builder for paged chart endpoints accepting ``limit``, ``page`` and ``period``."""

    def with_limit(self, value: int) -> Self:
        return self.with_param(query.limit(value))

    def with_page(self, value: int) -> Self:
        return self.with_param(query.page(value))

    def with_period(self, value: Period) -> Self:
        return self.with_param(query.period(value))


__all__ = ["BuilderState", "ChartRequest", "RequestBuilder", "RequestSpec"]
