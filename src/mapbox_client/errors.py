"""
Error types raised by the client.

Transport failures (DNS, connection, TLS) are not wrapped: they surface as the
``requests.RequestException`` subclass that ``requests`` raised.
"""

from __future__ import annotations


class MapboxError(Exception):
    """Base class for every error raised by this package."""


class EncodingError(MapboxError):
    """A request object could not be serialized. Raised before any network I/O."""


class StatusError(MapboxError):
    """The service answered with a status outside 200-299."""

    def __init__(self, status_code: int, reason: str, url: str | None = None) -> None:
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(self.status)

    @property
    def status(self) -> str:
        """Status line, e.g. ``"404 Not Found"``."""
        return f"{self.status_code} {self.reason}".strip()


class DecodeError(MapboxError):
    """The response body was not JSON or did not have the expected shape."""
