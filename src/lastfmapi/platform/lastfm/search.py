"""Combined artist/track/album search.

Where: src/lastfmapi/platform/lastfm/search.py
What: Run the three category searches concurrently and merge them.
Why: Keep fan-out and top-result selection apart from request building.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import Any, Protocol

from lastfmapi.platform.logging import logger

from .errors import MissingParameterError
from .models import Album, Artist, Page, PageMeta, SearchItem, SearchResult, Track


class SearchBackend(Protocol):
    """The per-category searches the aggregator fans out to."""

    def artist_search(self, q: str | None = None, **params: Any) -> Page[Artist]:
        ...

    def track_search(self, q: str | None = None, **params: Any) -> Page[Track]:
        ...

    def album_search(self, q: str | None = None, **params: Any) -> Page[Album]:
        ...


def merge_meta(query: str, metas: Sequence[PageMeta]) -> PageMeta:
    """Sum totals and page sizes; the page number comes from the first meta."""

    total = sum(meta.total for meta in metas)
    per_page = sum(meta.per_page for meta in metas)
    return PageMeta(
        query=query,
        page=metas[0].page if metas else 1,
        per_page=per_page,
        total=total,
        total_pages=math.ceil(total / per_page) if per_page else 0,
    )


def _listeners(item: SearchItem) -> int:
    if isinstance(item, Album):
        return 0
    return item.listeners or 0


def choose_top(
    query: str,
    artists: Sequence[Artist],
    tracks: Sequence[Track],
    albums: Sequence[Album],
) -> SearchItem | None:
    """Pick the most relevant item across categories.

    An exact (case-insensitive) name match wins, most listeners first, with
    albums ranked as having no listeners. Without one, the artist or track
    with most listeners is used; albums never win the fallback.
    ``max`` keeps the first of equal candidates, so artists beat tracks beat
    albums on ties.
    """

    needle = query.strip().casefold()
    everything: list[SearchItem] = [*artists, *tracks, *albums]
    exact = [item for item in everything if item.name.strip().casefold() == needle]
    if exact:
        return max(exact, key=_listeners)

    ranked: list[SearchItem] = [*artists, *tracks]
    if not ranked:
        return None
    return max(ranked, key=_listeners)


class SearchAggregator:
    """Fan out artist, track and album searches and merge the pages."""

    def __init__(
        self,
        backend: SearchBackend,
        *,
        executor_factory: Callable[[], ThreadPoolExecutor] | None = None,
    ) -> None:
        self._backend = backend
        self._executor_factory = executor_factory or self._default_executor

    @staticmethod
    def _default_executor() -> ThreadPoolExecutor:
        return ThreadPoolExecutor(max_workers=3, thread_name_prefix="lastfm-search")

    def search(
        self,
        q: str | None,
        *,
        limit: int | None = None,
        artists_limit: int | None = None,
        tracks_limit: int | None = None,
        albums_limit: int | None = None,
        page: int | None = None,
    ) -> SearchResult:
        """Search all three categories concurrently.

        Raises:
            MissingParameterError: If ``q`` is empty.
            LastFMError: The error of the first failed sub-search; no partial
                result is produced.
        """

        if not q or not q.strip():
            raise MissingParameterError(["q"])

        executor = self._executor_factory()
        try:
            artists_future: Future[Page[Artist]] = executor.submit(
                self._backend.artist_search, q, limit=artists_limit or limit, page=page
            )
            tracks_future: Future[Page[Track]] = executor.submit(
                self._backend.track_search, q, limit=tracks_limit or limit, page=page
            )
            albums_future: Future[Page[Album]] = executor.submit(
                self._backend.album_search, q, limit=albums_limit or limit, page=page
            )
            ordered: list[Future[Any]] = [artists_future, tracks_future, albums_future]

            done, _pending = wait(ordered, return_when=FIRST_EXCEPTION)
            for future in ordered:
                if future not in done:
                    continue
                error = future.exception()
                if error is not None:
                    logger.debug("Search for '%s' aborted: %s", q, error)
                    raise error

            artists = artists_future.result()
            tracks = tracks_future.result()
            albums = albums_future.result()
        finally:
            # Late sibling results are discarded.
            executor.shutdown(wait=False, cancel_futures=True)

        return SearchResult(
            meta=merge_meta(q, [artists.meta, tracks.meta, albums.meta]),
            artists=artists.result,
            tracks=tracks.result,
            albums=albums.result,
            top=choose_top(q, artists.result, tracks.result, albums.result),
        )


__all__ = ["SearchAggregator", "SearchBackend", "choose_top", "merge_meta"]
