"""src/lastfmapi/ui/cli/display/result.py
What: Render search results and raw operation payloads.
Why: Keep console output formatting consistent across commands.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from lastfmapi.platform.lastfm.models import Album, Artist, SearchItem, SearchResult, Track


def to_jsonable(value: Any) -> Any:
    """Convert result models to plain data; leave raw payloads untouched."""

    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return value


def _format_count(value: int | None) -> Text:
    if value is None:
        return Text("N/A", style="dim")
    return Text(f"{value:,}")


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_json(self, payload: Any, *, quiet: bool = False) -> None:
        """Print an operation result as indented JSON."""

        if quiet:
            return
        self.console.print_json(data=to_jsonable(payload))

    def show_search(self, result: SearchResult, *, quiet: bool = False) -> None:
        """Display the top result followed by one table per category."""

        if quiet:
            return

        meta = result.meta
        self.console.print(
            f"\n[bold]Search:[/bold] {meta.query} "
            f"[dim](page {meta.page} of {meta.total_pages}, {meta.total:,} matches)[/dim]"
        )

        if result.top is None:
            self.console.print("[yellow]No results.[/yellow]")
            return

        self.console.print(f"[bold green]Top:[/bold green] {self._describe(result.top)}")

        self._print_table("Artists", result.artists, result.top)
        self._print_table("Tracks", result.tracks, result.top)
        self._print_table("Albums", result.albums, result.top)

    @staticmethod
    def _describe(item: SearchItem) -> str:
        if isinstance(item, Artist):
            return f"{item.name} (artist)"
        return f"{item.name} by {item.artist_name or 'unknown'} ({item.type})"

    def _print_table(
        self,
        title: str,
        items: Sequence[Artist] | Sequence[Track] | Sequence[Album],
        top: SearchItem,
    ) -> None:
        if not items:
            return

        table = Table(
            title=title,
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Name", style="bold")
        table.add_column("Artist")
        table.add_column("Listeners", justify="right")

        for item in items:
            name = Text(item.name, style="bold green" if item is top else "")
            artist = Text("") if isinstance(item, Artist) else Text(item.artist_name or "N/A")
            table.add_row(name, artist, _format_count(item.listeners))

        self.console.print(table)
