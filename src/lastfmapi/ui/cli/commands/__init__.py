"""Command execution package for CLI."""

from lastfmapi.ui.cli.commands.call import CallCommand
from lastfmapi.ui.cli.commands.config_init import ConfigInitCommand
from lastfmapi.ui.cli.commands.executor import CommandExecutor, build_client
from lastfmapi.ui.cli.commands.search import SearchCommand

__all__ = [
    "CallCommand",
    "CommandExecutor",
    "ConfigInitCommand",
    "SearchCommand",
    "build_client",
]
