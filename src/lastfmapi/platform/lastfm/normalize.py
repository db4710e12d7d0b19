"""Where: src/lastfmapi/platform/lastfm/normalize.py
What: Pure helpers reshaping raw Last.fm JSON into normalized records.
Why: Separate payload interpretation from HTTP and request building.
"""

from __future__ import annotations

import math
import re
from typing import Any, Final, cast

from .models import Album, Artist, PageMeta, Track

# Largest first; unknown sizes share the rank of the empty size.
IMAGE_SIZE_ORDER: Final[tuple[str, ...]] = (
    "mega",
    "extralarge",
    "large",
    "medium",
    "small",
    "",
)

_READ_MORE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\s*<a [^>]*>Read more on Last\.fm</a>.*\Z",
    re.DOTALL | re.IGNORECASE,
)


def to_int(value: Any) -> int | None:
    """Coerce numeric strings (``"1200"``, ``"12.0"``) to ``int``; otherwise ``None``."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return int(number) if math.isfinite(number) else None


def as_entries(value: Any) -> list[dict[str, Any]]:
    """Return the dict entries of a list; a lone dict becomes a one-item list."""

    if isinstance(value, dict):
        return [cast(dict[str, Any], value)]
    if not isinstance(value, list):
        return []
    entries: list[dict[str, Any]] = []
    for entry in cast(list[object], value):
        if isinstance(entry, dict):
            entries.append(cast(dict[str, Any], entry))
    return entries


def _image_rank(size: Any) -> int:
    key = size if isinstance(size, str) else ""
    try:
        return IMAGE_SIZE_ORDER.index(key)
    except ValueError:
        return IMAGE_SIZE_ORDER.index("")


def parse_images(images: Any) -> list[str]:
    """Flatten an image list into URLs, largest size first.

    Entries with an empty URL are dropped; entries with an empty or unknown
    size are kept and sorted last.
    """

    candidates = [
        image for image in as_entries(images)
        if isinstance(image.get("#text"), str) and image["#text"].strip()
    ]
    candidates.sort(key=lambda image: _image_rank(image.get("size")))
    return [image["#text"] for image in candidates]


def parse_meta(data: Any, query: Any = None) -> PageMeta:
    """Build pagination metadata from ``opensearch:*`` or ``@attr`` fields."""

    payload = cast(dict[str, Any], data) if isinstance(data, dict) else {}

    if "opensearch:totalResults" in payload:
        total = to_int(payload.get("opensearch:totalResults")) or 0
        per_page = to_int(payload.get("opensearch:itemsPerPage")) or 0
        start_index = to_int(payload.get("opensearch:startIndex")) or 0
        page = start_index // per_page + 1 if per_page else 1
        total_pages = math.ceil(total / per_page) if per_page else 0
        return PageMeta(
            query=query,
            page=page,
            per_page=per_page,
            total=total,
            total_pages=total_pages,
        )

    attr_raw = payload.get("@attr")
    attr = cast(dict[str, Any], attr_raw) if isinstance(attr_raw, dict) else {}
    return PageMeta(
        query=query,
        page=to_int(attr.get("page")) or 1,
        per_page=to_int(attr.get("perPage")) or 0,
        total=to_int(attr.get("total")) or 0,
        total_pages=to_int(attr.get("totalPages")) or 0,
    )


def parse_summary(text: Any) -> str:
    """Strip the trailing "Read more on Last.fm" anchor from wiki/bio text."""

    if not isinstance(text, str):
        return ""
    return _READ_MORE_PATTERN.sub("", text, count=1)


def parse_tags(container: Any) -> list[str]:
    """Flatten ``{"tag": [...]}`` into tag names, preserving order."""

    if not isinstance(container, dict):
        return []
    tags = as_entries(cast(dict[str, Any], container).get("tag"))
    names: list[str] = []
    for tag in tags:
        name = tag.get("name")
        if isinstance(name, str) and name:
            names.append(name)
    return names


def artist_name_of(value: Any) -> str | None:
    """Read an artist reference that may be a plain string or an object."""

    if isinstance(value, str):
        return value or None
    if isinstance(value, dict):
        mapping = cast(dict[str, Any], value)
        for key in ("name", "#text"):
            candidate = mapping.get(key)
            if isinstance(candidate, str) and candidate:
                return candidate
    return None


def _below_threshold(listeners: int | None, min_listeners: int) -> bool:
    return min_listeners > 0 and (listeners or 0) < min_listeners


def parse_artists(entries: Any, min_listeners: int = 0) -> list[Artist]:
    """Map raw artist entries, dropping those under ``min_listeners``."""

    artists: list[Artist] = []
    for entry in as_entries(entries):
        listeners = to_int(entry.get("listeners"))
        if _below_threshold(listeners, min_listeners):
            continue
        artists.append(
            Artist(
                name=str(entry.get("name") or ""),
                listeners=listeners,
                images=tuple(parse_images(entry.get("image"))),
            )
        )
    return artists


def parse_albums(entries: Any) -> list[Album]:
    """Map raw album entries."""

    return [
        Album(
            name=str(entry.get("name") or ""),
            artist_name=artist_name_of(entry.get("artist")),
            listeners=to_int(entry.get("listeners")),
            images=tuple(parse_images(entry.get("image"))),
        )
        for entry in as_entries(entries)
    ]


def parse_tracks(
    entries: Any,
    min_listeners: int = 0,
    artist_name: str | None = None,
) -> list[Track]:
    """Map raw track entries, dropping those under ``min_listeners``.

    Args:
        entries: Raw track list.
        min_listeners: Listener threshold; 0 disables filtering.
        artist_name: Fallback artist when an entry carries none (album track lists).
    """

    tracks: list[Track] = []
    for entry in as_entries(entries):
        listeners = to_int(entry.get("listeners"))
        if _below_threshold(listeners, min_listeners):
            continue
        tracks.append(
            Track(
                name=str(entry.get("name") or ""),
                artist_name=artist_name_of(entry.get("artist")) or artist_name,
                duration=to_int(entry.get("duration")),
                listeners=listeners,
                images=tuple(parse_images(entry.get("image"))),
            )
        )
    return tracks


__all__ = [
    "IMAGE_SIZE_ORDER",
    "artist_name_of",
    "as_entries",
    "parse_albums",
    "parse_artists",
    "parse_images",
    "parse_meta",
    "parse_summary",
    "parse_tags",
    "parse_tracks",
    "to_int",
]
