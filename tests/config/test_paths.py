"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

import lastfmapi.config.paths as paths
from lastfmapi.config.paths import (
    default_config_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)


@pytest.fixture
def installed_layout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Behave as an installed package with no source checkout around it."""

    monkeypatch.setattr(paths, "_detect_checkout_root", lambda _start=None: None, raising=True)


def test_checkout_log_paths(checkout_root: Path) -> None:
    """Inside a checkout, logs live under the checkout's logs/ folder."""

    expected_dir = (checkout_root / "logs").resolve()
    assert default_log_dir(env={}) == expected_dir
    assert default_log_file(env={}) == expected_dir / "lastfmapi.log"


def test_checkout_config_path(checkout_root: Path) -> None:
    assert default_config_path(env={}) == (checkout_root / "config" / "config.toml").resolve()


def test_environment_overrides_win(checkout_root: Path, tmp_path: Path) -> None:
    env = {
        "LASTFMAPI_CONFIG": str(tmp_path / "custom.toml"),
        "LASTFMAPI_LOG_DIR": str(tmp_path / "custom-logs"),
    }

    assert default_config_path(env=env) == (tmp_path / "custom.toml").resolve()
    assert default_log_file(env=env) == (tmp_path / "custom-logs" / "lastfmapi.log").resolve()


def test_blank_environment_override_is_ignored(checkout_root: Path) -> None:
    resolved = default_config_path(env={"LASTFMAPI_CONFIG": "   "})

    assert resolved == (checkout_root / "config" / "config.toml").resolve()


@pytest.mark.usefixtures("installed_layout")
def test_installed_package_uses_xdg_directories(tmp_path: Path) -> None:
    env = {
        "XDG_CONFIG_HOME": str(tmp_path / "cfg"),
        "XDG_STATE_HOME": str(tmp_path / "state"),
    }

    assert default_config_path(env=env) == (tmp_path / "cfg" / "lastfmapi" / "config.toml").resolve()
    assert default_log_dir(env=env) == (tmp_path / "state" / "lastfmapi").resolve()


@pytest.mark.usefixtures("installed_layout")
def test_installed_package_falls_back_to_home(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    assert default_config_path(env={}) == (tmp_path / ".config" / "lastfmapi" / "config.toml").resolve()
    assert default_log_dir(env={}) == (tmp_path / ".local" / "state" / "lastfmapi").resolve()


def test_detect_checkout_root_requires_package_sources(tmp_path: Path) -> None:
    unrelated = tmp_path / "other" / "pkg" / "mod.py"
    unrelated.parent.mkdir(parents=True)
    _ = (tmp_path / "other" / "pyproject.toml").write_text("[project]\nname='other'\n")

    assert paths._detect_checkout_root(unrelated) is None  # pyright: ignore[reportPrivateUsage]

    module_file = tmp_path / "src" / "lastfmapi" / "config" / "paths.py"
    module_file.parent.mkdir(parents=True)
    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='lastfmapi'\n")

    assert paths._detect_checkout_root(module_file) == tmp_path  # pyright: ignore[reportPrivateUsage]


def test_explicit_path_wins(tmp_path: Path) -> None:
    explicit = tmp_path / "explicit.toml"

    resolved = resolve_overridable_path(
        explicit_path=str(explicit),
        env={"X": str(tmp_path / "env.toml")},
        env_var="X",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == explicit.resolve()
