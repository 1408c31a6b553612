"""Where: src/lfmq/platform/lastfm/endpoints/base.py
What: Endpoint descriptors and the JSON shape checks their decoders share.
Why: Every endpoint is the same pattern; only the method name and payload differ.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast

T = TypeVar("T")


class ShapeError(ValueError):
    """A JSON node does not have the shape a decoder expects."""

    def __init__(self, path: str, expected: str, actual: object) -> None:
        super().__init__(f"{path}: expected {expected}, got {_describe(actual)}")
        self.path = path


_MISSING = object()


def _describe(value: object) -> str:
    if value is _MISSING:
        return "nothing"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def require_mapping(node: object, path: str) -> Mapping[str, Any]:
    """Return ``node`` as a JSON object or raise ``ShapeError``."""

    if not isinstance(node, dict):
        raise ShapeError(path, "object", node)
    return cast(Mapping[str, Any], node)


def require_object(node: Mapping[str, Any], key: str, path: str) -> Mapping[str, Any]:
    return require_mapping(node.get(key, _MISSING), f"{path}.{key}")


def require_str(node: Mapping[str, Any], key: str, path: str) -> str:
    """Return a string member untouched; numbers are not coerced."""

    value = node.get(key, _MISSING)
    if not isinstance(value, str):
        raise ShapeError(f"{path}.{key}", "string", value)
    return value


def optional_str(node: Mapping[str, Any], key: str, path: str, default: str = "") -> str:
    value = node.get(key, _MISSING)
    if value is _MISSING or value is None:
        return default
    if not isinstance(value, str):
        raise ShapeError(f"{path}.{key}", "string", value)
    return value


def require_list(node: Mapping[str, Any], key: str, path: str) -> list[Mapping[str, Any]]:
    """Return a list of JSON objects.

    Last.fm collapses one-element lists into a bare object for some methods,
    so a single object is accepted as a list of one.
    """

    value = node.get(key, _MISSING)
    member_path = f"{path}.{key}"
    if isinstance(value, dict):
        return [cast(Mapping[str, Any], value)]
    if not isinstance(value, list):
        raise ShapeError(member_path, "array", value)
    items = cast(list[object], value)
    return [require_mapping(item, f"{member_path}[{index}]") for index, item in enumerate(items)]


@dataclass(slots=True, frozen=True)
class DecodeOutcome(Generic[T]):
    """Result of a trial decode: either a value or a diagnostic, never both."""

    value: T | None = None
    diagnostic: str | None = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None

    @classmethod
    def success(cls, value: T) -> "DecodeOutcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, diagnostic: str) -> "DecodeOutcome[T]":
        return cls(diagnostic=diagnostic)


@dataclass(slots=True, frozen=True)
class EndpointDescriptor(Generic[T]):
    """Describe one remote method and the payload it answers with.

    Attributes:
        method: Remote method name sent as the ``method`` parameter.
        envelope_key: Top-level key wrapping the payload in the response.
        identifying_params: Mandatory parameters fixed when a request is created.
        decode_payload: Builds the typed payload from the unwrapped envelope.
    """

    method: str
    envelope_key: str
    identifying_params: tuple[str, ...]
    decode_payload: Callable[[Mapping[str, Any], str], T]

    def decode(self, document: object) -> DecodeOutcome[T]:
        """Unwrap the envelope and decode the payload, reporting shape mismatches."""

        try:
            envelope = require_mapping(document, "$")
            inner = require_object(envelope, self.envelope_key, "$")
            payload = self.decode_payload(inner, f"$.{self.envelope_key}")
        except ShapeError as exc:
            return DecodeOutcome.failure(f"{self.method} payload mismatch: {exc}")
        return DecodeOutcome.success(payload)


__all__ = [
    "DecodeOutcome",
    "EndpointDescriptor",
    "ShapeError",
    "optional_str",
    "require_list",
    "require_mapping",
    "require_object",
    "require_str",
]
