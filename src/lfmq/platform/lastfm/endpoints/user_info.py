"""Where: src/lfmq/platform/lastfm/endpoints/user_info.py
What: ``user.getInfo`` descriptor and profile payload.
Why: Profile lookup shares the request pattern but has no chart options.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

from .base import EndpointDescriptor, optional_str, require_object, require_str
from .charts import Image, decode_images


@dataclass(slots=True, frozen=True)
class UserInfo:
    """Public profile of a Last.fm user. Counters stay service-formatted strings."""

    name: str
    realname: str
    url: str
    country: str
    playcount: str
    registered_unixtime: str
    subscriber: str
    account_type: str
    images: tuple[Image, ...]


def decode_user_info(node: Mapping[str, Any], path: str) -> UserInfo:
    registered = require_object(node, "registered", path)
    return UserInfo(
        name=require_str(node, "name", path),
        realname=optional_str(node, "realname", path),
        url=require_str(node, "url", path),
        country=optional_str(node, "country", path),
        playcount=require_str(node, "playcount", path),
        registered_unixtime=require_str(registered, "unixtime", f"{path}.registered"),
        subscriber=optional_str(node, "subscriber", path, default="0"),
        account_type=optional_str(node, "type", path),
        images=decode_images(node, path),
    )


USER_INFO: Final[EndpointDescriptor[UserInfo]] = EndpointDescriptor(
    method="user.getInfo",
    envelope_key="user",
    identifying_params=("user",),
    decode_payload=decode_user_info,
)


__all__ = ["USER_INFO", "UserInfo", "decode_user_info"]
