"""Pydantic-backed ResponseParser base — validate the payload into a model."""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel

from geoclient.application.ports.response_parser import ResponseParserPort
from geoclient.domain.value_objects.location import Location

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class ModelResponseParser(ResponseParserPort, Generic[PayloadT]):
    """ResponseParser that decodes JSON into ``payload_model``.

    Subclasses set ``payload_model`` and implement the two extraction
    hooks. Invalid JSON or a payload that does not match the model raises
    ``pydantic.ValidationError`` (a ValueError), which the fetch step
    reports as DecodeError.

    Example::

        class Payload(BaseModel):
            lat: float
            lng: float

        class LatLngParser(ModelResponseParser[Payload]):
            payload_model = Payload

            def _location(self, payload):
                return Location.from_pair(payload.lat, payload.lng)

            def _address(self, payload):
                return None
    """

    payload_model: ClassVar[type[BaseModel]]

    def __init__(self) -> None:
        self._payload: PayloadT | None = None

    def decode(self, raw: bytes) -> None:
        self._payload = self.payload_model.model_validate_json(raw)  # type: ignore[assignment]

    def location(self) -> Location | None:
        if self._payload is None:
            return None
        return self._location(self._payload)

    def address(self) -> str | None:
        if self._payload is None:
            return None
        return self._address(self._payload)

    def fresh(self) -> ModelResponseParser[PayloadT]:
        """Blank instance of the same class.

        Subclasses whose ``__init__`` takes arguments must override this.
        """
        return type(self)()

    @abstractmethod
    def _location(self, payload: PayloadT) -> Location | None:
        ...

    @abstractmethod
    def _address(self, payload: PayloadT) -> str | None:
        ...
