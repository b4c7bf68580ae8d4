"""Port interface for decoding provider responses."""

from __future__ import annotations

from abc import ABC, abstractmethod

from geoclient.domain.value_objects.location import Location


class ResponseParserPort(ABC):
    """Decodes one provider payload and exposes the normalized result.

    Instances hold the last decoded payload, so every request decodes into
    its own instance obtained from :meth:`fresh`.
    """

    @abstractmethod
    def decode(self, raw: bytes) -> None:
        """Load *raw* into this instance.

        Implementations either leave the instance blank on bad input or
        raise ValueError; the fetch step reports the latter as DecodeError.
        """
        ...

    @abstractmethod
    def location(self) -> Location | None:
        """Decoded coordinate, or None if nothing was decoded."""
        ...

    @abstractmethod
    def address(self) -> str | None:
        """Decoded address, or None if nothing was decoded."""
        ...

    @abstractmethod
    def fresh(self) -> ResponseParserPort:
        """Return a new blank instance of the same concrete type."""
        ...
