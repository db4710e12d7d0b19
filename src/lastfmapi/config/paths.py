"""Shared path utilities for configuration and log locations.

Lookup order for each location:
- An explicit environment override (``LASTFMAPI_CONFIG``, ``LASTFMAPI_LOG_DIR``).
- The development checkout: ``<checkout>/config/config.toml`` and
  ``<checkout>/logs`` when the package runs from a source tree.
- The per-user XDG directories: ``$XDG_CONFIG_HOME/lastfmapi/config.toml``
  and ``$XDG_STATE_HOME/lastfmapi`` (``~/.config`` and ``~/.local/state``
  when unset).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

_ENV_CONFIG_PATH: Final[str] = "LASTFMAPI_CONFIG"
_ENV_LOG_DIR: Final[str] = "LASTFMAPI_LOG_DIR"
_APP_DIR_NAME: Final[str] = "lastfmapi"
_LOG_FILE_NAME: Final[str] = "lastfmapi.log"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return default_factory().expanduser().resolve()


def _detect_checkout_root(start: Path | None = None) -> Path | None:
    """Return the source checkout containing this package, if any.

    A checkout is a parent holding ``pyproject.toml`` next to
    ``src/lastfmapi``; installed copies have neither and yield ``None``.
    """
    here = (start or Path(__file__).resolve()).parent
    for parent in [here, *here.parents]:
        if (parent / "pyproject.toml").exists() and (parent / "src" / _APP_DIR_NAME).is_dir():
            return parent
    return None


def _xdg_dir(env: Mapping[str, str] | None, env_var: str, fallback: str) -> Path:
    mapping = env if env is not None else os.environ
    base = (mapping.get(env_var) or "").strip()
    root = Path(base) if base else Path.home() / fallback
    return root / _APP_DIR_NAME


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the main TOML config file."""

    def _default() -> Path:
        checkout = _detect_checkout_root()
        if checkout is not None:
            return checkout / "config" / "config.toml"
        return _xdg_dir(env, "XDG_CONFIG_HOME", ".config") / "config.toml"

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_PATH,
        default_factory=_default,
    )


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the default directory for log files."""

    def _default() -> Path:
        checkout = _detect_checkout_root()
        if checkout is not None:
            return checkout / "logs"
        return _xdg_dir(env, "XDG_STATE_HOME", ".local/state")

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_LOG_DIR,
        default_factory=_default,
    )


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    """Get the default log file path."""

    return default_log_dir(env) / _LOG_FILE_NAME


__all__ = [
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
