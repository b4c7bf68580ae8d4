"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest
from pydantic import BaseModel

from geoclient.adapters.parsers.model_parser import ModelResponseParser
from geoclient.application.ports.endpoint_builder import EndpointBuilderPort
from geoclient.application.ports.response_parser import ResponseParserPort
from geoclient.domain.value_objects.location import Location

# ─── Fake provider ──────────────────────────────────────────────────


class FakeEndpoints(EndpointBuilderPort):
    def geocode_url(self, address):
        return f"http://fake/geocode?q={address}"

    def reverse_geocode_url(self, location):
        return f"http://fake/reverse?lat={location.latitude}&lng={location.longitude}"


class FakePayload(BaseModel):
    lat: float | None = None
    lng: float | None = None
    address: str | None = None


class FakeParser(ModelResponseParser[FakePayload]):
    """Strict parser: malformed payloads raise ValidationError."""

    payload_model = FakePayload

    def _location(self, payload):
        if payload.lat is None or payload.lng is None:
            return None
        return Location(payload.lat, payload.lng)

    def _address(self, payload):
        return payload.address


class SilentParser(ResponseParserPort):
    """Lenient parser: malformed payloads leave the instance blank."""

    def __init__(self):
        self._data: dict = {}

    def decode(self, raw):
        try:
            self._data = json.loads(raw)
        except ValueError:
            pass

    def location(self):
        if "lat" not in self._data or "lng" not in self._data:
            return None
        return Location(self._data["lat"], self._data["lng"])

    def address(self):
        return self._data.get("address")

    def fresh(self):
        return SilentParser()


# ─── Fixtures ───────────────────────────────────────────────────────


@pytest.fixture
def endpoints():
    return FakeEndpoints()


@pytest.fixture
def parser():
    return FakeParser()


@pytest.fixture
def silent_parser():
    return SilentParser()


@pytest.fixture
def mock_client() -> Callable[..., httpx.AsyncClient]:
    """Factory: AsyncClient whose requests are answered by *handler*."""

    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
