"""Where: src/lfmq/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to the Last.fm client without file I/O.
Assumptions: - Environment variables win over the config file for the API key.
Trade-offs: - Values are resolved once at import; tests patch module attributes.
"""

from __future__ import annotations

import os

from lfmq import __version__
from lfmq.config.config import (
    LASTFM_API_ROOT_DEFAULT,
    REQUEST_TIMEOUT_SECONDS_DEFAULT,
    config as app_config,
)

# Last.fm access -------------------------------------------------------------

LASTFM_API_KEY: str = (os.getenv("LASTFM_API_KEY") or app_config.api_key or "").strip()

LASTFM_API_ROOT: str = (app_config.api_root or "").strip() or LASTFM_API_ROOT_DEFAULT

_timeout = getattr(app_config, "timeout_seconds", REQUEST_TIMEOUT_SECONDS_DEFAULT)
REQUEST_TIMEOUT_SECONDS: float = (
    float(_timeout)
    if isinstance(_timeout, (int, float)) and not isinstance(_timeout, bool) and _timeout > 0
    else REQUEST_TIMEOUT_SECONDS_DEFAULT
)


# Application identity -------------------------------------------------------

# Sent as "AppName/AppVersion (contact)" so Last.fm can identify the caller.
APP_NAME: str = app_config.app_name or "lfmq"
APP_VERSION: str = app_config.app_version or __version__
APP_CONTACT: str = app_config.contact or ""


__all__ = [
    "APP_CONTACT",
    "APP_NAME",
    "APP_VERSION",
    "LASTFM_API_KEY",
    "LASTFM_API_ROOT",
    "REQUEST_TIMEOUT_SECONDS",
]
