"""Where: src/lfmq/platform/lastfm/user_agent.py
What: Build the User-Agent string sent with Last.fm requests.
Why: Last.fm asks API consumers to identify their application.
"""

from __future__ import annotations

from lfmq.config.settings import APP_CONTACT, APP_NAME, APP_VERSION


def format_user_agent(app_name: str, app_version: str, contact: str) -> str:
    """Return ``App/Version (contact)`` when contact information is available."""

    stripped = contact.strip()
    if stripped:
        return f"{app_name}/{app_version} ({stripped})"
    return f"{app_name}/{app_version}"


def default_user_agent() -> str:
    return format_user_agent(APP_NAME, APP_VERSION, APP_CONTACT)


__all__ = ["default_user_agent", "format_user_agent"]
