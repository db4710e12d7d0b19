"""Where: src/lastfmapi/platform/lastfm/client.py
What: Facade exposing typed Last.fm lookups, searches and corrections.
Why: Each public method validates its identifying fields, issues one request
     and hands the payload to a normalizer.

Collaborators:
- ``http_client`` performs the GET and JSON decoding
- ``envelope`` separates payloads from service errors
- ``methods`` maps operation ids to remote names and result fields
- ``normalize`` reshapes payloads into ``models``
- ``search`` runs the combined search
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

from lastfmapi.config.settings import API_BASE_URL, ClientSettings
from lastfmapi.platform.logging import logger

from .envelope import ApiFailure, parse_envelope
from .errors import ApiError, MissingParameterError, TransportError
from .http_client import DEFAULT_HTTP_CLIENT, HTTPClient
from .methods import API_METHODS, get_method
from .models import (
    Album,
    AlbumInfo,
    Artist,
    ArtistInfo,
    Correction,
    Page,
    SearchResult,
    TagInfo,
    Track,
    TrackInfo,
)
from .normalize import (
    artist_name_of,
    parse_albums,
    parse_artists,
    parse_images,
    parse_meta,
    parse_summary,
    parse_tags,
    parse_tracks,
    to_int,
)
from .search import SearchAggregator
from .user_agent import resolve_user_agent

if TYPE_CHECKING:
    from lastfmapi.config.config import Config


def _mapping(value: Any) -> dict[str, Any]:
    if isinstance(value, dict):
        return cast(dict[str, Any], value)
    return {}


def _section(payload: Any, key: str) -> dict[str, Any]:
    """Return ``payload[key]`` when it is a mapping, else an empty dict."""

    return _mapping(_mapping(payload).get(key))


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def _require(**fields: Any) -> None:
    missing = [name for name, value in fields.items() if not _present(value)]
    if missing:
        raise MissingParameterError(missing)


class LastFM:
    """Last.fm web service client.

    Every public method issues at most one request (``search`` issues three)
    and raises ``MissingParameterError`` before any I/O when identifying
    fields are absent. Extra keyword arguments such as ``limit``, ``page`` or
    ``lang`` are forwarded as query parameters.
    """

    def __init__(
        self,
        api_key: str | None,
        user_agent: str | None = None,
        *,
        min_artist_listeners: int = 0,
        min_track_listeners: int = 0,
        http_client: HTTPClient | None = None,
    ) -> None:
        if api_key is None or not api_key.strip():
            raise MissingParameterError(["api_key"], "Missing required `api_key` argument")
        self.settings: ClientSettings = ClientSettings(
            api_key=api_key.strip(),
            user_agent=resolve_user_agent(user_agent),
            min_artist_listeners=min_artist_listeners,
            min_track_listeners=min_track_listeners,
        )
        self._http: HTTPClient = http_client or DEFAULT_HTTP_CLIENT
        self._aggregator = SearchAggregator(self)

    @classmethod
    def from_config(cls, config: "Config", *, http_client: HTTPClient | None = None) -> "LastFM":
        """Build a client from the TOML-backed ``Config``."""

        return cls(
            config.api_key,
            config.user_agent,
            min_artist_listeners=config.min_artist_listeners,
            min_track_listeners=config.min_track_listeners,
            http_client=http_client,
        )

    @property
    def user_agent(self) -> str:
        return self.settings.user_agent

    # -- request pipeline ---------------------------------------------------

    def _send_request(self, params: Mapping[str, Any], result_field: str) -> Any:
        """Issue one GET and return the sub-object under ``result_field``."""

        query: dict[str, str] = {
            key: str(value) for key, value in params.items() if value is not None
        }
        query["api_key"] = self.settings.api_key
        query["format"] = "json"
        headers = {"User-Agent": self.settings.user_agent}
        api_method = query.get("method", "?")

        started = time.perf_counter()
        try:
            response = self._http.get_json(API_BASE_URL, query, headers)
        except TransportError as exc:
            logger.warning(
                "%s",
                exc,
                extra={"api_method": api_method, "api_event": "api.transport_error"},
            )
            raise
        duration_ms = (time.perf_counter() - started) * 1000.0

        if not isinstance(response.data, dict):
            error = TransportError(
                f"Last.fm returned an unexpected body for {api_method} (status={response.status})"
            )
            logger.warning(
                "%s",
                error,
                extra={"api_method": api_method, "api_event": "api.transport_error"},
            )
            raise error

        outcome = parse_envelope(cast(dict[str, Any], response.data), result_field)
        if isinstance(outcome, ApiFailure):
            logger.warning(
                "%s",
                outcome.message,
                extra={
                    "api_method": api_method,
                    "api_event": "api.error",
                    "status": response.status,
                    "duration_ms": duration_ms,
                },
            )
            raise ApiError(outcome.message, code=outcome.code)

        if not 200 <= response.status < 300:
            error = TransportError(
                f"Last.fm HTTP error for {api_method}: status={response.status}"
            )
            logger.warning(
                "%s",
                error,
                extra={"api_method": api_method, "api_event": "api.transport_error"},
            )
            raise error

        logger.debug(
            "request completed",
            extra={
                "api_method": api_method,
                "api_event": "api.request",
                "status": response.status,
                "duration_ms": duration_ms,
            },
        )
        return outcome.data

    def _call(self, operation: str, params: Mapping[str, Any]) -> Any:
        method = get_method(operation)
        merged: dict[str, Any] = dict(params)
        merged.update(method.base_params())
        return self._send_request(merged, method.result_field)

    def call(self, operation: str, **params: Any) -> Any:
        """Invoke a public method by operation id (``"artist.info"``, ``"search"``).

        Raises:
            KeyError: If the operation is unknown.
        """

        if operation != "search" and operation not in API_METHODS:
            raise KeyError(f"Unknown Last.fm operation: {operation}")
        handler = getattr(self, operation.replace(".", "_"))
        return handler(**params)

    # -- parameter helpers --------------------------------------------------

    @staticmethod
    def _pair_or_mbid(
        field: str,
        name: str | None,
        artist_name: str | None,
        mbid: str | None,
        extra: Mapping[str, Any],
    ) -> dict[str, Any]:
        params: dict[str, Any] = dict(extra)
        if _present(mbid):
            params["mbid"] = mbid
            params[field] = name
            params["artist"] = artist_name
            return params
        _require(name=name, artist_name=artist_name)
        params[field] = name
        params["artist"] = artist_name
        return params

    @staticmethod
    def _artist_or_mbid(name: str | None, mbid: str | None, extra: Mapping[str, Any]) -> dict[str, Any]:
        if not _present(name) and not _present(mbid):
            raise MissingParameterError(["name", "mbid"], "Missing both name and mbid")
        params: dict[str, Any] = dict(extra)
        params["artist"] = name
        params["mbid"] = mbid
        return params

    @staticmethod
    def _tag(name: str | None, extra: Mapping[str, Any]) -> dict[str, Any]:
        _require(name=name)
        params: dict[str, Any] = dict(extra)
        params["tag"] = name
        return params

    # -- album --------------------------------------------------------------

    def album_info(
        self,
        name: str | None = None,
        artist_name: str | None = None,
        *,
        mbid: str | None = None,
        **params: Any,
    ) -> AlbumInfo:
        """Album details with tags, track list and wiki summary."""

        album = _mapping(
            self._call("album.info", self._pair_or_mbid("album", name, artist_name, mbid, params))
        )
        album_artist = artist_name_of(album.get("artist"))
        return AlbumInfo(
            name=str(album.get("name") or name or ""),
            artist_name=album_artist or artist_name,
            listeners=to_int(album.get("listeners")),
            playcount=to_int(album.get("playcount")),
            images=tuple(parse_images(album.get("image"))),
            tags=tuple(parse_tags(album.get("tags"))),
            tracks=tuple(
                parse_tracks(_section(album, "tracks").get("track"), artist_name=album_artist)
            ),
            summary=parse_summary(_section(album, "wiki").get("summary")),
            url=album.get("url"),
        )

    def album_top_tags(
        self,
        name: str | None = None,
        artist_name: str | None = None,
        *,
        mbid: str | None = None,
        **params: Any,
    ) -> Any:
        return self._call(
            "album.top_tags", self._pair_or_mbid("album", name, artist_name, mbid, params)
        )

    def album_search(self, q: str | None = None, **params: Any) -> Page[Album]:
        _require(q=q)
        data = self._call("album.search", {**params, "album": q})
        return Page(
            meta=parse_meta(data, q),
            result=tuple(parse_albums(_section(data, "albummatches").get("album"))),
        )

    # -- artist -------------------------------------------------------------

    def artist_correction(self, name: str | None = None, **params: Any) -> Correction | None:
        """Suggested canonical artist name, or ``None`` when there is none."""

        _require(name=name)
        data = self._call("artist.correction", {**params, "artist": name})
        artist = _section(_section(data, "correction"), "artist")
        corrected = artist.get("name")
        if not isinstance(corrected, str) or not corrected:
            return None
        return Correction(name=corrected)

    def artist_info(
        self,
        name: str | None = None,
        *,
        mbid: str | None = None,
        **params: Any,
    ) -> ArtistInfo:
        """Artist details with stats, tags, similar artists and biography."""

        artist = _mapping(self._call("artist.info", self._artist_or_mbid(name, mbid, params)))
        stats = _section(artist, "stats")
        return ArtistInfo(
            name=str(artist.get("name") or name or ""),
            listeners=to_int(stats.get("listeners")),
            playcount=to_int(stats.get("playcount")),
            images=tuple(parse_images(artist.get("image"))),
            tags=tuple(parse_tags(artist.get("tags"))),
            summary=parse_summary(_section(artist, "bio").get("summary")),
            similar=tuple(parse_artists(_section(artist, "similar").get("artist"))),
            url=artist.get("url"),
        )

    def artist_similar(self, name: str | None = None, *, mbid: str | None = None, **params: Any) -> Any:
        return self._call("artist.similar", self._artist_or_mbid(name, mbid, params))

    def artist_top_albums(
        self,
        name: str | None = None,
        *,
        mbid: str | None = None,
        **params: Any,
    ) -> Page[Album]:
        data = self._call("artist.top_albums", self._artist_or_mbid(name, mbid, params))
        return Page(
            meta=parse_meta(data, name or mbid),
            result=tuple(parse_albums(_mapping(data).get("album"))),
        )

    def artist_top_tags(self, name: str | None = None, *, mbid: str | None = None, **params: Any) -> Any:
        return self._call("artist.top_tags", self._artist_or_mbid(name, mbid, params))

    def artist_top_tracks(
        self,
        name: str | None = None,
        *,
        mbid: str | None = None,
        **params: Any,
    ) -> Page[Track]:
        data = self._call("artist.top_tracks", self._artist_or_mbid(name, mbid, params))
        return Page(
            meta=parse_meta(data, name or mbid),
            result=tuple(
                parse_tracks(
                    _mapping(data).get("track"),
                    self.settings.min_track_listeners,
                )
            ),
        )

    def artist_search(self, q: str | None = None, **params: Any) -> Page[Artist]:
        _require(q=q)
        data = self._call("artist.search", {**params, "artist": q})
        return Page(
            meta=parse_meta(data, q),
            result=tuple(
                parse_artists(
                    _section(data, "artistmatches").get("artist"),
                    self.settings.min_artist_listeners,
                )
            ),
        )

    # -- chart --------------------------------------------------------------

    def chart_top_artists(self, **params: Any) -> Any:
        return self._call("chart.top_artists", params)

    def chart_top_tags(self, **params: Any) -> Any:
        return self._call("chart.top_tags", params)

    def chart_top_tracks(self, **params: Any) -> Any:
        return self._call("chart.top_tracks", params)

    # -- geo ----------------------------------------------------------------

    def geo_top_artists(self, country: str | None = None, **params: Any) -> Any:
        _require(country=country)
        return self._call("geo.top_artists", {**params, "country": country})

    def geo_top_tracks(self, country: str | None = None, **params: Any) -> Any:
        _require(country=country)
        return self._call("geo.top_tracks", {**params, "country": country})

    # -- tag ----------------------------------------------------------------

    def tag_info(self, name: str | None = None, **params: Any) -> TagInfo:
        tag = _mapping(self._call("tag.info", self._tag(name, params)))
        return TagInfo(
            name=str(tag.get("name") or name or ""),
            reach=to_int(tag.get("reach")),
            total=to_int(tag.get("total")),
            summary=parse_summary(_section(tag, "wiki").get("summary")),
        )

    def tag_similar(self, name: str | None = None, **params: Any) -> Any:
        return self._call("tag.similar", self._tag(name, params))

    def tag_top_albums(self, name: str | None = None, **params: Any) -> Any:
        return self._call("tag.top_albums", self._tag(name, params))

    def tag_top_artists(self, name: str | None = None, **params: Any) -> Any:
        return self._call("tag.top_artists", self._tag(name, params))

    def tag_top_tags(self, **params: Any) -> Any:
        return self._call("tag.top_tags", params)

    def tag_top_tracks(self, name: str | None = None, **params: Any) -> Any:
        return self._call("tag.top_tracks", self._tag(name, params))

    def tag_weekly_chart_list(self, name: str | None = None, **params: Any) -> Any:
        return self._call("tag.weekly_chart_list", self._tag(name, params))

    # -- track --------------------------------------------------------------

    def track_correction(
        self,
        name: str | None = None,
        artist_name: str | None = None,
        **params: Any,
    ) -> Correction | None:
        """Suggested canonical track and artist names, or ``None``."""

        _require(name=name, artist_name=artist_name)
        data = self._call("track.correction", {**params, "track": name, "artist": artist_name})
        track = _section(_section(data, "correction"), "track")
        corrected = track.get("name")
        if not isinstance(corrected, str) or not corrected:
            return None
        return Correction(name=corrected, artist_name=artist_name_of(track.get("artist")))

    def track_info(
        self,
        name: str | None = None,
        artist_name: str | None = None,
        *,
        mbid: str | None = None,
        **params: Any,
    ) -> TrackInfo:
        """Track details; images come from the track's album."""

        track = _mapping(
            self._call("track.info", self._pair_or_mbid("track", name, artist_name, mbid, params))
        )
        album = _section(track, "album")
        album_title = album.get("title")
        return TrackInfo(
            name=str(track.get("name") or name or ""),
            artist_name=artist_name_of(track.get("artist")) or artist_name,
            album_name=album_title if isinstance(album_title, str) else None,
            duration=to_int(track.get("duration")),
            listeners=to_int(track.get("listeners")),
            playcount=to_int(track.get("playcount")),
            images=tuple(parse_images(album.get("image"))),
            tags=tuple(parse_tags(track.get("toptags"))),
            summary=parse_summary(_section(track, "wiki").get("summary")),
            url=track.get("url"),
        )

    def track_similar(
        self,
        name: str | None = None,
        artist_name: str | None = None,
        *,
        mbid: str | None = None,
        **params: Any,
    ) -> Any:
        return self._call(
            "track.similar", self._pair_or_mbid("track", name, artist_name, mbid, params)
        )

    def track_top_tags(
        self,
        name: str | None = None,
        artist_name: str | None = None,
        *,
        mbid: str | None = None,
        **params: Any,
    ) -> Any:
        return self._call(
            "track.top_tags", self._pair_or_mbid("track", name, artist_name, mbid, params)
        )

    def track_search(
        self,
        q: str | None = None,
        artist_name: str | None = None,
        **params: Any,
    ) -> Page[Track]:
        _require(q=q)
        data = self._call("track.search", {**params, "track": q, "artist": artist_name})
        return Page(
            meta=parse_meta(data, q),
            result=tuple(
                parse_tracks(
                    _section(data, "trackmatches").get("track"),
                    self.settings.min_track_listeners,
                )
            ),
        )

    # -- combined -----------------------------------------------------------

    def search(
        self,
        q: str | None = None,
        *,
        limit: int | None = None,
        artists_limit: int | None = None,
        tracks_limit: int | None = None,
        albums_limit: int | None = None,
        page: int | None = None,
    ) -> SearchResult:
        """Search artists, tracks and albums at once and pick a top result."""

        return self._aggregator.search(
            q,
            limit=limit,
            artists_limit=artists_limit,
            tracks_limit=tracks_limit,
            albums_limit=albums_limit,
            page=page,
        )


__all__ = ["LastFM"]
