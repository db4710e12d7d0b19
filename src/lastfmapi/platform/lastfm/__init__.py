"""Last.fm web service client package.

Provides the ``LastFM`` client, the normalized result models and the error
taxonomy raised by every operation.
"""

from .client import LastFM
from .errors import ApiError, LastFMError, MissingParameterError, TransportError
from .methods import API_METHODS, ApiMethod
from .models import (
    Album,
    AlbumInfo,
    Artist,
    ArtistInfo,
    Correction,
    Page,
    PageMeta,
    SearchResult,
    TagInfo,
    Track,
    TrackInfo,
)

__all__ = [
    "API_METHODS",
    "Album",
    "AlbumInfo",
    "ApiError",
    "ApiMethod",
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
    "TransportError",
    "Track",
    "TrackInfo",
]
