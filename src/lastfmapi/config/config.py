"""Configuration management for lastfmapi."""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from lastfmapi.config.file_ops import write_text_file
from lastfmapi.config.paths import default_config_path
from lastfmapi.platform.logging import logger

_ENV_API_KEY = "LASTFM_API_KEY"
_ENV_USER_AGENT = "LASTFM_USER_AGENT"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Last.fm API credentials
    api_key: str | None = None
    user_agent: str | None = None

    # Result filtering (0 disables)
    min_artist_listeners: int = 0
    min_track_listeners: int = 0

    # Log file path
    log_file: Path | None = _path_field()

    # Cached instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            target: Destination file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            write_text_file(destination, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", destination)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# lastfmapi configuration file")
        lines.append("")

        lines.append("# Last.fm API key (required to issue requests)")
        lines.append("# Falls back to the LASTFM_API_KEY environment variable when omitted")
        if config["api_key"]:
            lines.append(f"api_key = {self._format_toml_value(config['api_key'])}")
        else:
            lines.append('# api_key = "your-api-key"')
        lines.append("")

        lines.append("# User-Agent header sent with every request (optional)")
        if config["user_agent"]:
            lines.append(f"user_agent = {self._format_toml_value(config['user_agent'])}")
        else:
            lines.append('# user_agent = "my-app/1.0 (me@example.com)"')
        lines.append("")

        lines.append("# Drop artists/tracks with fewer listeners than these thresholds")
        lines.append("# 0 disables filtering")
        lines.append(
            f"min_artist_listeners = {self._format_toml_value(config['min_artist_listeners'])}"
        )
        lines.append(
            f"min_track_listeners = {self._format_toml_value(config['min_track_listeners'])}"
        )
        lines.append("")

        lines.append("# Log file path (optional)")
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        else:
            lines.append('# log_file = "/path/to/logs/lastfmapi.log"')
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, env: Mapping[str, str] | None = None) -> "Config":
        """Load configuration from file, falling back to defaults.

        Environment variables fill in ``api_key`` and ``user_agent`` when the
        file leaves them unset.

        Args:
            env: Environment mapping used for overrides. Defaults to ``os.environ``.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        environment = env if env is not None else os.environ
        config_file = default_config_path(environment)

        config_dict: dict[str, Any] = {}
        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise
            logger.debug("Configuration loaded from %s", config_file)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
        config_dict = {key: value for key, value in config_dict.items() if key in known}

        if not config_dict.get("api_key"):
            config_dict["api_key"] = environment.get(_ENV_API_KEY) or None
        if not config_dict.get("user_agent"):
            config_dict["user_agent"] = environment.get(_ENV_USER_AGENT) or None

        instance = cls(**config_dict)
        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""
        cls._instance = None
        cls._loaded_from = None
