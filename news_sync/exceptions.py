from __future__ import annotations

from typing import Optional


class NetworkFailure(Exception):
    """Raised when a fetch cannot produce its full, decoded result."""

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class TransportError(NetworkFailure):
    """Raised on connection, timeout or protocol failures."""


class HttpStatusError(NetworkFailure):
    """Raised when the server answers with a non-2xx status."""

    def __init__(self, message: str, *, url: Optional[str] = None, status_code: int) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code


class DecodeError(NetworkFailure):
    """Raised when a response body is not JSON or has an unexpected shape."""
