"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, final


@final
@dataclass(slots=True)
class SearchArgs:
    """Command line arguments for the ``search`` subcommand."""

    command: Literal["search"]
    query: str
    api_key: str | None
    verbose: bool
    quiet: bool
    limit: int | None = None
    page: int | None = None
    as_json: bool = False


@final
@dataclass(slots=True)
class CallArgs:
    """Command line arguments for the ``call`` subcommand."""

    command: Literal["call"]
    operation: str
    api_key: str | None
    verbose: bool
    quiet: bool
    params: dict[str, Any] = field(default_factory=dict)


@final
@dataclass(slots=True)
class ConfigInitArgs:
    """Command line arguments for the ``config init`` subcommand."""

    command: Literal["config"]
    target: Path
    force: bool
    verbose: bool
    quiet: bool


CLIArgs = SearchArgs | CallArgs | ConfigInitArgs
