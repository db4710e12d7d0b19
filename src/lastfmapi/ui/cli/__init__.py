"""Command line interface package."""

from lastfmapi.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
