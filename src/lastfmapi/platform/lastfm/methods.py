"""Where: src/lastfmapi/platform/lastfm/methods.py
What: Fixed table of remote operations and where each nests its payload.
Why: Keep method names, result fields and autocorrect flags in one lookup.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final


@dataclass(frozen=True, slots=True)
class ApiMethod:
    """Describe one remote Last.fm operation."""

    name: str
    result_field: str
    autocorrect: bool = False

    def base_params(self) -> dict[str, str]:
        """Parameters every call of this operation sends."""

        params = {"method": self.name}
        if self.autocorrect:
            params["autocorrect"] = "1"
        return params


API_METHODS: Final[Mapping[str, ApiMethod]] = MappingProxyType(
    {
        # album
        "album.info": ApiMethod("album.getInfo", "album", autocorrect=True),
        "album.top_tags": ApiMethod("album.getTopTags", "toptags", autocorrect=True),
        "album.search": ApiMethod("album.search", "results"),
        # artist
        "artist.correction": ApiMethod("artist.getCorrection", "corrections"),
        "artist.info": ApiMethod("artist.getInfo", "artist", autocorrect=True),
        "artist.similar": ApiMethod("artist.getSimilar", "similarartists", autocorrect=True),
        "artist.top_albums": ApiMethod("artist.getTopAlbums", "topalbums", autocorrect=True),
        "artist.top_tags": ApiMethod("artist.getTopTags", "toptags", autocorrect=True),
        "artist.top_tracks": ApiMethod("artist.getTopTracks", "toptracks", autocorrect=True),
        "artist.search": ApiMethod("artist.search", "results"),
        # chart
        "chart.top_artists": ApiMethod("chart.getTopArtists", "artists", autocorrect=True),
        "chart.top_tags": ApiMethod("chart.getTopTags", "tags", autocorrect=True),
        "chart.top_tracks": ApiMethod("chart.getTopTracks", "tracks", autocorrect=True),
        # geo
        "geo.top_artists": ApiMethod("geo.getTopArtists", "topartists", autocorrect=True),
        "geo.top_tracks": ApiMethod("geo.getTopTracks", "tracks", autocorrect=True),
        # tag
        "tag.info": ApiMethod("tag.getInfo", "tag"),
        "tag.similar": ApiMethod("tag.getSimilar", "similartags"),
        "tag.top_albums": ApiMethod("tag.getTopAlbums", "albums"),
        "tag.top_artists": ApiMethod("tag.getTopArtists", "topartists"),
        "tag.top_tags": ApiMethod("tag.getTopTags", "toptags"),
        "tag.top_tracks": ApiMethod("tag.getTopTracks", "tracks"),
        "tag.weekly_chart_list": ApiMethod("tag.getWeeklyChartList", "weeklychartlist"),
        # track
        "track.correction": ApiMethod("track.getCorrection", "corrections"),
        "track.info": ApiMethod("track.getInfo", "track", autocorrect=True),
        "track.similar": ApiMethod("track.getSimilar", "similartracks", autocorrect=True),
        "track.top_tags": ApiMethod("track.getTopTags", "toptags", autocorrect=True),
        "track.search": ApiMethod("track.search", "results"),
    }
)


def get_method(operation: str) -> ApiMethod:
    """Look up an operation id such as ``"artist.info"``.

    Raises:
        KeyError: If the operation is unknown.
    """

    try:
        return API_METHODS[operation]
    except KeyError:
        raise KeyError(f"Unknown Last.fm operation: {operation}") from None


__all__ = ["API_METHODS", "ApiMethod", "get_method"]
