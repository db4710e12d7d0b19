"""Tests for immutable client settings."""

from dataclasses import FrozenInstanceError

import pytest

from lastfmapi.config.settings import API_BASE_URL, REQUEST_TIMEOUT_SECONDS, ClientSettings


def test_negative_thresholds_are_clamped_to_zero() -> None:
    settings = ClientSettings(
        api_key="k",
        user_agent="ua/1",
        min_artist_listeners=-5,
        min_track_listeners=-1,
    )

    assert settings.min_artist_listeners == 0
    assert settings.min_track_listeners == 0


def test_settings_are_frozen() -> None:
    settings = ClientSettings(api_key="k", user_agent="ua/1")

    with pytest.raises(FrozenInstanceError):
        settings.api_key = "other"  # type: ignore[misc]


def test_request_defaults() -> None:
    assert API_BASE_URL == "https://ws.audioscrobbler.com/2.0/"
    assert REQUEST_TIMEOUT_SECONDS == 30.0
