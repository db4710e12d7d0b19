"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def checkout_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Pretend the package runs from a checkout rooted at a temporary directory."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")
    (tmp_path / "src" / "lastfmapi").mkdir(parents=True)

    import lastfmapi.config.paths as paths

    def _fake_detect_checkout_root(_start: Path | None = None) -> Path | None:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_checkout_root", _fake_detect_checkout_root, raising=True)
    monkeypatch.delenv("LASTFMAPI_CONFIG", raising=False)
    monkeypatch.delenv("LASTFMAPI_LOG_DIR", raising=False)
    return tmp_path


@pytest.fixture
def fresh_config(checkout_root: Path) -> Iterator[Path]:
    """Clear the cached ``Config`` around a test run."""

    from lastfmapi.config.config import Config

    Config.reset()
    try:
        yield checkout_root
    finally:
        Config.reset()
