"""Where: src/lastfmapi/platform/lastfm/models.py
What: Normalized result records returned by the Last.fm client.
Why: Give callers stable, typed shapes instead of raw service JSON.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Generic, Literal, TypeVar


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _to_plain(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return {_camel(f.name): _to_plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    return value


class _Serializable:
    __slots__ = ()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict with camelCase keys."""

        return _to_plain(self)


@dataclass(frozen=True, slots=True)
class Artist(_Serializable):
    """Artist entry from search results and top lists."""

    name: str
    listeners: int | None = None
    images: tuple[str, ...] = ()
    type: Literal["artist"] = field(default="artist", init=False)


@dataclass(frozen=True, slots=True)
class Album(_Serializable):
    """Album entry; search results carry no listener count."""

    name: str
    artist_name: str | None = None
    listeners: int | None = None
    images: tuple[str, ...] = ()
    type: Literal["album"] = field(default="album", init=False)


@dataclass(frozen=True, slots=True)
class Track(_Serializable):
    """Track entry from search results, top lists and album track lists."""

    name: str
    artist_name: str | None = None
    duration: int | None = None
    listeners: int | None = None
    images: tuple[str, ...] = ()
    type: Literal["track"] = field(default="track", init=False)


SearchItem = Artist | Album | Track
T = TypeVar("T", Artist, Album, Track)


@dataclass(frozen=True, slots=True)
class PageMeta(_Serializable):
    """Pagination metadata for a listing or search response."""

    query: Any
    page: int
    per_page: int
    total: int
    total_pages: int


@dataclass(frozen=True, slots=True)
class Page(_Serializable, Generic[T]):
    """One page of normalized results."""

    meta: PageMeta
    result: tuple[T, ...]


@dataclass(frozen=True, slots=True)
class ArtistInfo(_Serializable):
    name: str
    listeners: int | None = None
    playcount: int | None = None
    images: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    summary: str = ""
    similar: tuple[Artist, ...] = ()
    url: str | None = None
    type: Literal["artist"] = field(default="artist", init=False)


@dataclass(frozen=True, slots=True)
class AlbumInfo(_Serializable):
    name: str
    artist_name: str | None = None
    listeners: int | None = None
    playcount: int | None = None
    images: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    tracks: tuple[Track, ...] = ()
    summary: str = ""
    url: str | None = None
    type: Literal["album"] = field(default="album", init=False)


@dataclass(frozen=True, slots=True)
class TrackInfo(_Serializable):
    name: str
    artist_name: str | None = None
    album_name: str | None = None
    duration: int | None = None
    listeners: int | None = None
    playcount: int | None = None
    images: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    summary: str = ""
    url: str | None = None
    type: Literal["track"] = field(default="track", init=False)


@dataclass(frozen=True, slots=True)
class TagInfo(_Serializable):
    name: str
    reach: int | None = None
    total: int | None = None
    summary: str = ""
    type: Literal["tag"] = field(default="tag", init=False)


@dataclass(frozen=True, slots=True)
class Correction(_Serializable):
    """Canonical name suggested by a correction endpoint."""

    name: str
    artist_name: str | None = None


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Merged artist, track and album search results."""

    meta: PageMeta
    artists: tuple[Artist, ...] = ()
    tracks: tuple[Track, ...] = ()
    albums: tuple[Album, ...] = ()
    top: SearchItem | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return ``{meta, result: {artists, tracks, albums, top}}``."""

        return {
            "meta": self.meta.to_dict(),
            "result": {
                "artists": [item.to_dict() for item in self.artists],
                "tracks": [item.to_dict() for item in self.tracks],
                "albums": [item.to_dict() for item in self.albums],
                "top": self.top.to_dict() if self.top is not None else None,
            },
        }


__all__ = [
    "Album",
    "AlbumInfo",
    "Artist",
    "ArtistInfo",
    "Correction",
    "Page",
    "PageMeta",
    "SearchItem",
    "SearchResult",
    "TagInfo",
    "Track",
    "TrackInfo",
]
