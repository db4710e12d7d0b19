"""
Summary: Validate Where/What/Why header docstrings for the Last.fm client modules.
Why: Prevent regression to inconsistent header formats across the client package.
"""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

REPO_ROOT: Path = Path(__file__).resolve().parents[1]
HEADER_PREFIXES: tuple[str, ...] = ("Where: ", "What: ", "Why: ")

TARGET_MODULES: tuple[Path, ...] = (
    Path("src/lastfmapi/config/settings.py"),
    Path("src/lastfmapi/platform/lastfm/client.py"),
    Path("src/lastfmapi/platform/lastfm/envelope.py"),
    Path("src/lastfmapi/platform/lastfm/errors.py"),
    Path("src/lastfmapi/platform/lastfm/http_client.py"),
    Path("src/lastfmapi/platform/lastfm/methods.py"),
    Path("src/lastfmapi/platform/lastfm/models.py"),
    Path("src/lastfmapi/platform/lastfm/normalize.py"),
    Path("src/lastfmapi/platform/lastfm/search.py"),
    Path("src/lastfmapi/platform/lastfm/user_agent.py"),
)


@pytest.mark.parametrize("module_path", TARGET_MODULES, ids=lambda path: str(path))
def test_module_headers_follow_where_what_why_schema(module_path: Path) -> None:
    """Ensure the module docstring names its location, purpose and reason, in that order."""

    source = (REPO_ROOT / module_path).read_text(encoding="utf-8")
    docstring = ast.get_docstring(ast.parse(source))
    assert docstring, f"{module_path} must start with a header docstring"

    lines = docstring.splitlines()
    positions: list[int] = []
    for prefix in HEADER_PREFIXES:
        index = next((i for i, line in enumerate(lines) if line.startswith(prefix)), None)
        assert index is not None, f"{module_path} header must contain a '{prefix.strip()}' line"
        assert lines[index].removeprefix(prefix).strip(), (
            f"{module_path} '{prefix.strip()}' text cannot be empty"
        )
        positions.append(index)

    assert positions == sorted(positions), f"{module_path} header lines are out of order"


def test_where_line_matches_file_location() -> None:
    """The ``Where`` line of each client module points at the module itself."""

    for module_path in TARGET_MODULES:
        docstring = ast.get_docstring(ast.parse((REPO_ROOT / module_path).read_text(encoding="utf-8")))
        assert docstring is not None
        where = next(line for line in docstring.splitlines() if line.startswith("Where: "))
        assert where.removeprefix("Where: ").strip() == module_path.as_posix()
