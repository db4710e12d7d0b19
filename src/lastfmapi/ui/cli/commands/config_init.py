"""src/lastfmapi/ui/cli/commands/config_init.py
What: Write a commented configuration template.
Why: Give users a starting point for the API key and listener thresholds.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from lastfmapi.config.config import Config
from lastfmapi.ui.cli.args.options import ConfigInitArgs


@final
class ConfigInitCommand:
    """Create the configuration file unless it already exists."""

    def __init__(self, args: ConfigInitArgs, *, console: Console | None = None) -> None:
        self._args = args
        self._console = console or Console()

    def execute(self) -> bool:
        """Write the template.

        Returns:
            bool: ``False`` when the file exists and ``--force`` was not given.
        """
        target = self._args.target
        if target.exists() and not self._args.force:
            self._console.print(
                f"[yellow]{target} already exists; use --force to overwrite.[/yellow]"
            )
            return False

        written = Config().save(target)
        if not self._args.quiet:
            self._console.print(f"[green]Wrote configuration template to {written}[/green]")
        return True
