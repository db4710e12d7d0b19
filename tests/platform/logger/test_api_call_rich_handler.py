"""Tests for the ``ApiCallRichHandler`` request tracing format."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from lastfmapi.platform.logging import LOGGER_NAME, ApiCallRichHandler, setup_logger


def _make_handler() -> ApiCallRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return ApiCallRichHandler(console=console)


def _build_record(msg: str = "", **extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="lastfmapi",
        level=logging.DEBUG,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_message_formats_successful_request() -> None:
    handler = _make_handler()
    record = _build_record(
        api_method="artist.getInfo",
        api_event="api.request",
        status=200,
        duration_ms=123.456,
    )

    rendered = handler.render_message(record, "request completed")

    assert isinstance(rendered, Text)
    assert rendered.plain == "[api.request] artist.getInfo 200 123.5ms request completed"


def test_render_message_formats_service_error() -> None:
    handler = _make_handler()
    record = _build_record(
        api_method="track.getInfo",
        api_event="api.error",
        status=400,
        duration_ms=8.0,
    )

    rendered = handler.render_message(record, "Track not found")

    assert isinstance(rendered, Text)
    assert rendered.plain == "[api.error] track.getInfo 400 8.0ms Track not found"


def test_render_message_without_status_or_duration() -> None:
    handler = _make_handler()
    record = _build_record(api_method="album.search", api_event="api.transport_error")

    rendered = handler.render_message(record, "timed out")

    assert isinstance(rendered, Text)
    assert rendered.plain == "[api.transport_error] album.search timed out"


def test_render_message_falls_back_for_plain_records() -> None:
    handler = _make_handler()
    record = _build_record("Configuration saved")

    rendered = handler.render_message(record, "Configuration saved")

    assert isinstance(rendered, Text)
    assert rendered.plain == "Configuration saved"


def test_setup_logger_attaches_rotating_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "lastfmapi.log"

    logger = setup_logger(log_file=log_file, console_level=logging.INFO)
    try:
        kinds = [type(handler).__name__ for handler in logger.handlers]
        assert kinds == ["ApiCallRichHandler", "RotatingFileHandler"]
        assert logger.handlers[0].level == logging.INFO
        assert log_file.parent.is_dir()
    finally:
        _ = setup_logger()


def test_setup_logger_without_file_is_console_only() -> None:
    logger = setup_logger()

    assert [type(handler).__name__ for handler in logger.handlers] == ["ApiCallRichHandler"]


def test_setup_logger_defaults_to_warnings_on_console() -> None:
    logger = setup_logger()

    assert logger.name == LOGGER_NAME
    assert logger.handlers[0].level == logging.WARNING


def test_setup_logger_replaces_previous_handlers(tmp_path: Path) -> None:
    first = setup_logger(log_file=tmp_path / "a.log")
    second = setup_logger(log_file=tmp_path / "b.log")
    try:
        assert first is second
        assert len(second.handlers) == 2
    finally:
        _ = setup_logger()
