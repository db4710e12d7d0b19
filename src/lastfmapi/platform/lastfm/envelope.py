"""Where: src/lastfmapi/platform/lastfm/envelope.py
What: Interpret decoded Last.fm bodies as a tagged payload or failure.
Why: The service reports errors as an ``error`` field on otherwise normal
     bodies; callers should not inspect ad hoc fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, cast


@dataclass(frozen=True, slots=True)
class ApiPayload:
    """The sub-object stored under the operation's result field."""

    data: Any


@dataclass(frozen=True, slots=True)
class ApiFailure:
    """Error indicator returned by the service."""

    code: int | None
    message: str


ApiResult = ApiPayload | ApiFailure


def _coerce_code(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_envelope(body: dict[str, Any], result_field: str) -> ApiResult:
    """Split a decoded body into ``ApiPayload`` or ``ApiFailure``.

    A missing result field yields an empty mapping rather than ``None`` so
    that normalizers always receive a container.
    """

    if "error" in body:
        message = body.get("message")
        code = _coerce_code(body.get("error"))
        if not isinstance(message, str) or not message.strip():
            message = f"Last.fm error {code}" if code is not None else "Last.fm error"
        return ApiFailure(code=code, message=message)

    data = body.get(result_field)
    if data is None:
        return ApiPayload(data=cast(dict[str, Any], {}))
    return ApiPayload(data=data)


__all__ = ["ApiFailure", "ApiPayload", "ApiResult", "parse_envelope"]
