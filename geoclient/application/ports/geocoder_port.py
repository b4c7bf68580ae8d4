"""Port interface for geocoding addresses to coordinates and back."""

from abc import ABC, abstractmethod

from geoclient.domain.value_objects.location import Location


class GeocoderPort(ABC):
    @abstractmethod
    async def geocode(self, address: str) -> Location:
        """Convert address string to lat/lng coordinates.

        Raises NoResultError if the address cannot be resolved.
        """
        ...

    @abstractmethod
    async def reverse_geocode(self, latitude: float, longitude: float) -> str:
        """Convert lat/lng coordinates to an address string.

        Raises NoResultError if no address is found.
        """
        ...
