"""Location value object — immutable (lat, lng) pair."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float

    @classmethod
    def from_pair(cls, latitude: float, longitude: float) -> "Location":
        """Build a Location from loosely typed numbers (str/int/float)."""
        return cls(latitude=float(latitude), longitude=float(longitude))
