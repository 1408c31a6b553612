"""Where: src/lfmq/platform/lastfm/params.py
What: Encode typed request options into query-string pairs.
Why: Keep wire formatting in one place so builders only deal in typed values.
"""

from __future__ import annotations

from enum import Enum
from typing import Final, TypeAlias

QueryParam: TypeAlias = tuple[str, str]


class Period(str, Enum):
    """Time window for chart endpoints.

    ``ONE_YEAR`` is an alias of ``TWELVE_MONTHS``; both send ``12month``.
    """

    OVERALL = "overall"
    SEVEN_DAYS = "7day"
    ONE_MONTH = "1month"
    THREE_MONTHS = "3month"
    SIX_MONTHS = "6month"
    TWELVE_MONTHS = "12month"
    ONE_YEAR = "12month"

    @property
    def token(self) -> str:
        """Wire token sent as the ``period`` parameter."""

        return self.value

    @staticmethod
    def from_user_input(value: str) -> "Period":
        """Translate a wire token or member name into a period."""

        normalized = value.strip().lower()
        for name, member in Period.__members__.items():
            if member.value == normalized or name.lower() == normalized.replace("-", "_"):
                return member
        valid: Final[str] = ", ".join(p.value for p in Period)
        msg = f"Unsupported period '{value}'. Valid options: {valid}"
        raise ValueError(msg)


ParamValue: TypeAlias = int | bool | str | Period


def encode_value(value: ParamValue) -> str:
    """Render a typed option value the way Last.fm expects it on the wire."""

    if isinstance(value, Period):
        return value.value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    return value


def limit(value: int) -> QueryParam:
    """Number of entries per page. Range checks are left to the service."""

    return ("limit", encode_value(value))


def page(value: int) -> QueryParam:
    return ("page", encode_value(value))


def period(value: Period) -> QueryParam:
    return ("period", encode_value(value))


__all__ = [
    "ParamValue",
    "Period",
    "QueryParam",
    "encode_value",
    "limit",
    "page",
    "period",
]
