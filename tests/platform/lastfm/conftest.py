"""Shared fixtures for Last.fm client tests."""

from __future__ import annotations

import pytest

from lastfm_fakes import FakeHTTPClient
from lastfmapi.platform.lastfm.client import LastFM


@pytest.fixture
def fake_http() -> FakeHTTPClient:
    return FakeHTTPClient()


@pytest.fixture
def client(fake_http: FakeHTTPClient) -> LastFM:
    return LastFM("test-key", "test-agent/1.0", http_client=fake_http)
