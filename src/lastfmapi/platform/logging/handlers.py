"""Rich handler rendering outbound API call records.

Where: platform/logging/handlers.py
What: Format records carrying ``api_method`` extras as a compact coloured line.
Why: Keep request tracing readable without changing call-site log messages.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rich.logging import RichHandler
from rich.text import Text

if TYPE_CHECKING:
    from rich.console import ConsoleRenderable


class ApiCallRichHandler(RichHandler):
    """Render ``api.*`` event records with method, status and duration."""

    _EVENT_STYLES: dict[str, str] = {
        "api.request": "cyan",
        "api.error": "red",
        "api.transport_error": "bold red",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("show_path", False)
        kwargs.setdefault("markup", False)
        super().__init__(*args, **kwargs)

    def render_message(self, record: logging.LogRecord, message: str) -> "ConsoleRenderable":
        api_method = getattr(record, "api_method", None)
        if not isinstance(api_method, str):
            return super().render_message(record, message)

        event = getattr(record, "api_event", "api.request")
        style = self._EVENT_STYLES.get(str(event), "cyan")

        text = Text()
        _ = text.append(f"[{event}] ", style=style)
        _ = text.append(api_method, style="bold")

        status = getattr(record, "status", None)
        if status is not None:
            status_style = "green" if isinstance(status, int) and 200 <= status < 300 else "yellow"
            _ = text.append(f" {status}", style=status_style)

        duration_ms = getattr(record, "duration_ms", None)
        if isinstance(duration_ms, (int, float)):
            _ = text.append(f" {duration_ms:.1f}ms", style="dim")

        if message:
            _ = text.append(f" {message}")
        return text


__all__ = ["ApiCallRichHandler"]
