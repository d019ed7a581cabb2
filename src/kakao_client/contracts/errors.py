"""
Exceptions raised by the Kakao client.

Configuration mistakes (bad sort order, page out of range, ...) are raised by
the builder setter itself and subclass ``ValueError``. Everything that can go
wrong while talking to the server surfaces unchanged to the caller, with the
underlying httpx/pydantic exception chained as ``__cause__``.
"""

from __future__ import annotations

from typing import Any


class KakaoError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(KakaoError, ValueError):
    """Raised when a builder receives an argument outside its legal domain."""


class TransportError(KakaoError):
    """Raised when the HTTP request could not be completed."""


class APIError(KakaoError):
    """
    Raised when the Kakao API answers with a non-2xx status.

    Kakao error bodies look like ``{"errorType": "...", "message": "..."}`` or
    ``{"code": -401, "msg": "..."}``; whichever is present is kept.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        code: int | str | None = None,
        raw_response: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.raw_response = raw_response

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.args[0]}"


class DecodeError(KakaoError):
    """Raised when a response body is not JSON or does not match the result schema."""


class FileTooLargeError(KakaoError):
    """Raised before upload when an image file exceeds the size cap."""

    def __init__(self, filename: str, size: int, limit: int):
        super().__init__(f"{filename} is {size} bytes; uploads are limited to {limit} bytes")
        self.filename = filename
        self.size = size
        self.limit = limit


class SaveError(KakaoError, ValueError):
    """Raised when a result cannot be saved to the requested filename."""


class EndOfPagesError(KakaoError):
    """Raised by a paginated iterator once no more pages can be requested."""
