"""lastfmapi: a typed client for the Last.fm web service."""

from lastfmapi.config.settings import APP_VERSION as __version__
from lastfmapi.platform.lastfm import (
    Album,
    AlbumInfo,
    ApiError,
    Artist,
    ArtistInfo,
    Correction,
    LastFM,
    LastFMError,
    MissingParameterError,
    Page,
    PageMeta,
    SearchResult,
    TagInfo,
    Track,
    TrackInfo,
    TransportError,
)

__all__ = [
    "Album",
    "AlbumInfo",
    "ApiError",
    "Artist",
    "ArtistInfo",
    "Correction",
    "LastFM",
    "LastFMError",
    "MissingParameterError",
    "Page",
    "PageMeta",
    "SearchResult",
    "TagInfo",
    "Track",
    "TrackInfo",
    "TransportError",
    "__version__",
]
