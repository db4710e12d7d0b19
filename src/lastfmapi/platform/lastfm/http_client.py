"""Where: src/lastfmapi/platform/lastfm/http_client.py
What: HTTP adapter performing Last.fm GET requests and JSON decoding.
Why: Decouple network concerns from envelope parsing and normalization.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, cast

import requests

from lastfmapi.config.settings import REQUEST_TIMEOUT_SECONDS

from .errors import TransportError


@dataclass(slots=True)
class HTTPResult:
    """Represent an HTTP response payload relevant to the Last.fm client."""

    status: int
    headers: dict[str, str]
    data: Any


class HTTPClient(Protocol):
    """Protocol for HTTP clients able to fetch JSON payloads."""

    def get_json(
        self,
        url: str,
        params: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> HTTPResult:
        ...


class LastFMHTTPClient:
    """Perform a single GET request per call; no retries.

    Any ``requests`` failure or undecodable body raises ``TransportError``.
    Non-2xx responses with a JSON body are returned as-is so the caller can
    read the service's error payload.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self._session = session
        self._timeout = timeout

    def get_json(
        self,
        url: str,
        params: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> HTTPResult:
        getter = self._session.get if self._session is not None else requests.get
        try:
            response = getter(
                url,
                params=dict(params),
                headers=dict(headers),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Last.fm request failed: {exc}", original=exc) from exc

        status = int(response.status_code)
        header_items = cast(Iterable[tuple[str, str]], response.headers.items())
        response_headers = {str(key): str(value) for key, value in header_items}

        try:
            data = response.json()
        except ValueError as exc:
            raise TransportError(
                f"Last.fm returned a non-JSON body (status={status})",
                original=exc,
            ) from exc

        return HTTPResult(status=status, headers=response_headers, data=data)


DEFAULT_HTTP_CLIENT = LastFMHTTPClient()


__all__ = [
    "DEFAULT_HTTP_CLIENT",
    "HTTPClient",
    "HTTPResult",
    "LastFMHTTPClient",
]
