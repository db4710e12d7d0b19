"""Where: src/lastfmapi/platform/lastfm/errors.py
What: Exception taxonomy raised by the Last.fm client.
Why: Let callers tell bad input, transport failures and service errors apart.
"""

from __future__ import annotations

from collections.abc import Iterable


class LastFMError(Exception):
    """Base class for every error raised by this package."""


class MissingParameterError(LastFMError, ValueError):
    """A required identifying parameter was not supplied.

    Raised before any request is sent.
    """

    def __init__(self, missing: Iterable[str], message: str | None = None) -> None:
        self.missing: tuple[str, ...] = tuple(missing)
        super().__init__(message or f"Missing required param: {', '.join(self.missing)}")


class TransportError(LastFMError):
    """The request failed before a usable JSON body was received."""

    def __init__(self, message: str, original: BaseException | None = None) -> None:
        super().__init__(message)
        self.original: BaseException | None = original


class ApiError(LastFMError):
    """The service answered with an ``error`` payload."""

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: int | None = code

    def __str__(self) -> str:
        if self.code is None:
            return self.message
        return f"{self.message} (error {self.code})"


__all__ = [
    "ApiError",
    "LastFMError",
    "MissingParameterError",
    "TransportError",
]
