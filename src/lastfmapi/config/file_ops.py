"""Utility helpers for configuration file persistence."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def write_text_file(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` atomically, creating parent directories.

    The text goes to a sibling temporary file first, so readers never see a
    half-written config.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            _ = handle.write(content)
        os.replace(temp_name, path)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise


__all__ = ["write_text_file"]
