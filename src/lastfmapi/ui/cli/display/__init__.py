"""Display management for CLI interface."""

from lastfmapi.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
