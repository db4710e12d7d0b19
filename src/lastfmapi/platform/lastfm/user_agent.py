"""Where: src/lastfmapi/platform/lastfm/user_agent.py
What: Build the User-Agent string sent to Last.fm.
Why: Keep identification rules in one place for the client and the CLI.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from lastfmapi.config.settings import APP_CONTACT, APP_NAME, APP_VERSION


def format_user_agent(app_name: str, app_version: str, contact: str) -> str:
    """Return ``App/Version (contact)`` when contact information is available."""

    stripped = contact.strip()
    if stripped:
        return f"{app_name}/{app_version} ({stripped})"
    return f"{app_name}/{app_version}"


def resolve_user_agent(
    explicit: str | None = None,
    env: Mapping[str, str] | None = None,
) -> str:
    """Pick the User-Agent: explicit value, then ``LASTFM_USER_AGENT``, then the default."""

    if explicit and explicit.strip():
        return explicit.strip()
    mapping = env if env is not None else os.environ
    from_env = (mapping.get("LASTFM_USER_AGENT") or "").strip()
    if from_env:
        return from_env
    return format_user_agent(APP_NAME, APP_VERSION, APP_CONTACT)


__all__ = ["format_user_agent", "resolve_user_agent"]
