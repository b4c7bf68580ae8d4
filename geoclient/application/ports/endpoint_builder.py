"""Port interface for building provider request URLs."""

from abc import ABC, abstractmethod

from geoclient.domain.value_objects.location import Location


class EndpointBuilderPort(ABC):
    @abstractmethod
    def geocode_url(self, address: str) -> str:
        """Return the absolute request URL for geocoding *address*.

        *address* is passed raw; escaping and any extra query parameters
        (API keys, region bias, ...) are up to the implementation.
        """
        ...

    @abstractmethod
    def reverse_geocode_url(self, location: Location) -> str:
        """Return the absolute request URL for reverse geocoding *location*."""
        ...
