"""Where: src/lastfmapi/config/settings.py
What: Immutable client settings and application identity constants.
Why: Give each client instance one frozen configuration value instead of
     process-wide mutable globals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

# Application identity ------------------------------------------------------

APP_NAME: Final[str] = "lastfmapi"
APP_VERSION: Final[str] = "0.1.0"
APP_CONTACT: Final[str] = ""

# Request defaults -----------------------------------------------------------

API_BASE_URL: Final[str] = "https://ws.audioscrobbler.com/2.0/"
REQUEST_TIMEOUT_SECONDS: Final[float] = 30.0


@dataclass(frozen=True, slots=True)
class ClientSettings:
    """Configuration owned by a single ``LastFM`` client."""

    api_key: str
    user_agent: str
    min_artist_listeners: int = 0
    min_track_listeners: int = 0

    def __post_init__(self) -> None:
        # Thresholds below zero mean "no filtering", same as zero.
        if self.min_artist_listeners < 0:
            object.__setattr__(self, "min_artist_listeners", 0)
        if self.min_track_listeners < 0:
            object.__setattr__(self, "min_track_listeners", 0)


__all__ = [
    "APP_CONTACT",
    "APP_NAME",
    "APP_VERSION",
    "API_BASE_URL",
    "REQUEST_TIMEOUT_SECONDS",
    "ClientSettings",
]
