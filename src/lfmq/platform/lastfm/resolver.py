"""Where: src/lfmq/platform/lastfm/resolver.py
What: Turn a raw Last.fm response body into a payload or a typed failure.
Why: Last.fm answers errors with the same transport status as data, so the
     body shape is the only reliable discriminator.
"""

from __future__ import annotations

import json
from typing import TypeVar, cast

from .endpoints.base import DecodeOutcome, EndpointDescriptor, ShapeError, require_mapping
from .errors import ParsingError, ServiceError, TransportError

T = TypeVar("T")


def decode_error_envelope(document: object) -> DecodeOutcome[ServiceError]:
    """Trial-decode ``{"error": <code>, "message": <text>}``."""

    try:
        envelope = require_mapping(document, "$")
        code = envelope.get("error")
        if not isinstance(code, int) or isinstance(code, bool):
            raise ShapeError("$.error", "integer", code)
        message = envelope.get("message")
        if not isinstance(message, str):
            raise ShapeError("$.message", "string", message)
    except ShapeError as exc:
        return DecodeOutcome.failure(str(exc))
    return DecodeOutcome.success(ServiceError(code, message))


def _decode_text(body: bytes | str) -> str:
    if isinstance(body, str):
        return body
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TransportError(f"Response body is not valid UTF-8: {exc}") from exc


def resolve_response(body: bytes | str, descriptor: EndpointDescriptor[T]) -> T:
    """Decode ``body`` for ``descriptor``.

    The error envelope is tried first and wins even when the body would also
    satisfy the payload shape.

    Raises:
        TransportError: The body could not be read as text.
        ServiceError: Last.fm reported an error.
        ParsingError: The body matched neither shape.
    """

    text = _decode_text(body)
    try:
        document: object = json.loads(text)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError, oversized integer literals and runaway nesting
        raise ParsingError(f"{descriptor.method} response is not JSON: {exc}") from exc

    error = decode_error_envelope(document)
    if error.value is not None:
        raise error.value

    payload = descriptor.decode(document)
    if payload.diagnostic is not None:
        raise ParsingError(payload.diagnostic, error_shape_diagnostic=error.diagnostic)
    return cast(T, payload.value)


__all__ = ["decode_error_envelope", "resolve_response"]
