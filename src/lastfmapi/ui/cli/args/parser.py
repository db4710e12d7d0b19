"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, final

from lastfmapi.config.config import Config
from lastfmapi.config.paths import default_config_path
from lastfmapi.platform.lastfm.methods import API_METHODS
from lastfmapi.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from lastfmapi.ui.cli.args.options import CallArgs, CLIArgs, ConfigInitArgs, SearchArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="lastfmapi",
            description="lastfmapi - query the Last.fm web service from the command line.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        common = argparse.ArgumentParser(add_help=False)
        _ = common.add_argument(
            "--api-key",
            type=str,
            help="Last.fm API key (overrides config file and LASTFM_API_KEY)",
            metavar="KEY",
        )
        _ = common.add_argument(
            "--verbose",
            action="store_true",
            help="Show request tracing",
        )
        _ = common.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        search_parser = subparsers.add_parser(
            "search",
            parents=[common],
            help="Search artists, tracks and albums at once",
        )
        _ = search_parser.add_argument("query", type=str, metavar="QUERY")
        _ = search_parser.add_argument(
            "--limit",
            type=int,
            help="Results per category",
        )
        _ = search_parser.add_argument(
            "--page",
            type=int,
            help="Page number to request",
        )
        _ = search_parser.add_argument(
            "--json",
            dest="as_json",
            action="store_true",
            help="Print the merged result as JSON instead of tables",
        )

        call_parser = subparsers.add_parser(
            "call",
            parents=[common],
            help="Invoke a single operation and print its result as JSON",
            description="Operations: " + ", ".join(sorted(API_METHODS)),
        )
        _ = call_parser.add_argument(
            "operation",
            type=str,
            metavar="OPERATION",
            help="Operation id such as artist.info or tag.top_tracks",
        )
        _ = call_parser.add_argument(
            "params",
            nargs="*",
            metavar="KEY=VALUE",
            help="Operation parameters, e.g. name=Cher limit=5",
        )

        config_parser = subparsers.add_parser("config", help="Manage the configuration file")
        config_subparsers = config_parser.add_subparsers(dest="config_command", required=True)
        init_parser = config_subparsers.add_parser(
            "init",
            parents=[common],
            help="Write a commented configuration template",
        )
        _ = init_parser.add_argument(
            "--path",
            type=str,
            help="Destination file (defaults to the standard config location)",
            metavar="PATH",
        )
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing file",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If parsing or validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "search":
            return ArgumentParser._process_search(parsed_args)

        if command == "call":
            return ArgumentParser._process_call(parser, parsed_args)

        if command == "config":
            return ArgumentParser._process_config(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_search(parsed_args: argparse.Namespace) -> SearchArgs:
        if parsed_args.limit is not None and parsed_args.limit <= 0:
            logger.error("Limit must be a positive integer; received %s", parsed_args.limit)
            sys.exit(2)

        return SearchArgs(
            command="search",
            query=parsed_args.query,
            api_key=parsed_args.api_key,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            limit=parsed_args.limit,
            page=parsed_args.page,
            as_json=parsed_args.as_json,
        )

    @staticmethod
    def _process_call(
        parser: argparse.ArgumentParser,
        parsed_args: argparse.Namespace,
    ) -> CallArgs:
        operation: str = parsed_args.operation
        if operation != "search" and operation not in API_METHODS:
            parser.error(f"unknown operation '{operation}'")

        params: dict[str, Any] = {}
        for item in parsed_args.params:
            key, sep, value = str(item).partition("=")
            if not sep or not key:
                parser.error(f"parameters must look like KEY=VALUE, got '{item}'")
            params[key] = value

        return CallArgs(
            command="call",
            operation=operation,
            api_key=parsed_args.api_key,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            params=params,
        )

    @staticmethod
    def _process_config(parsed_args: argparse.Namespace) -> ConfigInitArgs:
        target = Path(parsed_args.path).expanduser().resolve() if parsed_args.path else default_config_path()
        return ConfigInitArgs(
            command="config",
            target=target,
            force=parsed_args.force,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
