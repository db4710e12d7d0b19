"""Command line argument parsing."""

from lastfmapi.ui.cli.args.options import CallArgs, CLIArgs, ConfigInitArgs, SearchArgs
from lastfmapi.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "CallArgs", "ConfigInitArgs", "SearchArgs"]
