"""Error hierarchy raised by geoclient.

Hierarchy::

    GeocoderError
    ├── GeocodeTimeoutError   ← round trip exceeded the time budget
    ├── NoResultError         ← round trip succeeded but nothing was found
    ├── TransportError        ← network failure or non-2xx HTTP status
    └── DecodeError           ← payload rejected by the response parser
"""

from __future__ import annotations


class GeocoderError(Exception):
    """Base exception for all geoclient errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class GeocodeTimeoutError(GeocoderError, TimeoutError):
    """No response was produced within the configured timeout."""

    def __init__(self, timeout: float) -> None:
        super().__init__(f"No response within {timeout:g}s")
        self.timeout: float = timeout


class NoResultError(GeocoderError):
    """The provider answered, but the payload held no location / address."""

    def __init__(self, query: str) -> None:
        super().__init__(f"No result for {query}")
        self.query: str = query


class TransportError(GeocoderError):
    """The HTTP request failed or returned a non-success status."""

    def __init__(self, url: str, reason: str, status_code: int | None = None) -> None:
        super().__init__(f"Request to '{url}' failed: {reason}")
        self.url: str = url
        self.reason: str = reason
        self.status_code: int | None = status_code


class DecodeError(GeocoderError):
    """The response body could not be decoded by the response parser."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Could not decode response from '{url}': {reason}")
        self.url: str = url
        self.reason: str = reason
