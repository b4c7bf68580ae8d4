"""ResultClassifier — turn "nothing decoded" into an explicit NoResultError."""

from __future__ import annotations

from geoclient.domain.errors import NoResultError
from geoclient.domain.value_objects.location import Location


def classify_location(location: Location | None, query: str = "address") -> Location:
    """Return *location* or raise NoResultError when it is absent.

    A decoded ``Location(0.0, 0.0)`` is a real point and passes through.

    Raises:
        NoResultError: if *location* is None.
    """
    if location is None:
        raise NoResultError(query)
    return location


def classify_address(address: str | None, query: str = "location") -> str:
    """Return *address* or raise NoResultError when it is absent or empty.

    Raises:
        NoResultError: if *address* is None or "".
    """
    if not address:
        raise NoResultError(query)
    return address
