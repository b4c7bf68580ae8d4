"""Geocoder — builder + parser + timed fetch composed into one client."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from geoclient.adapters.http.fetcher import fetch_and_decode
from geoclient.application.ports.endpoint_builder import EndpointBuilderPort
from geoclient.application.ports.geocoder_port import GeocoderPort
from geoclient.application.ports.response_parser import ResponseParserPort
from geoclient.application.timed_request import run_with_timeout
from geoclient.config import settings
from geoclient.domain.policies.result_classifier import (
    classify_address,
    classify_location,
)
from geoclient.domain.value_objects.location import Location

logger = logging.getLogger(__name__)


class Geocoder(GeocoderPort):
    """Geocoding client for one provider.

    The provider is described by an endpoint builder and a response parser
    prototype; neither is mutated, so one Geocoder can serve many concurrent
    requests. Each request decodes into ``response_parser.fresh()``.

    Args:
        endpoint_builder: builds request URLs for the provider.
        response_parser: prototype parser; only its ``fresh()`` is used.
        client: optional shared ``httpx.AsyncClient`` (caller owns it).
            Without one a short-lived client is opened per request.
        timeout: round-trip budget in seconds (default from settings).
        strip_array_wrapper: trim ``[...]`` around payloads before decoding
            (default from settings).
    """

    def __init__(
        self,
        endpoint_builder: EndpointBuilderPort,
        response_parser: ResponseParserPort,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        strip_array_wrapper: bool | None = None,
    ):
        self._endpoints = endpoint_builder
        self._parser = response_parser
        self._client = client
        self._timeout = timeout if timeout is not None else settings.timeout_seconds
        self._strip_array_wrapper = (
            strip_array_wrapper
            if strip_array_wrapper is not None
            else settings.strip_array_wrapper
        )
        if self._timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self._timeout!r}")

    @property
    def timeout(self) -> float:
        return self._timeout

    async def geocode(self, address: str) -> Location:
        """Resolve *address* to a Location.

        Raises:
            GeocodeTimeoutError: no response within the timeout.
            NoResultError: the provider returned no location.
            TransportError: network failure or non-2xx status.
            DecodeError: the parser rejected the payload.
        """
        url = self._endpoints.geocode_url(address)
        target = self._parser.fresh()

        async def work() -> Location | None:
            await self._fetch(url, target)
            return target.location()

        found = await run_with_timeout(work(), self._timeout)
        if found is None:
            logger.info("No location for '%s'", address)
        location = classify_location(found, query=f"address '{address}'")
        logger.info("Resolved '%s' → (%f, %f)", address, location.latitude, location.longitude)
        return location

    async def reverse_geocode(self, latitude: float, longitude: float) -> str:
        """Resolve a coordinate pair to an address string.

        Raises the same errors as :meth:`geocode`.
        """
        url = self._endpoints.reverse_geocode_url(Location.from_pair(latitude, longitude))
        target = self._parser.fresh()

        async def work() -> str | None:
            await self._fetch(url, target)
            return target.address()

        found = await run_with_timeout(work(), self._timeout)
        if not found:
            logger.info("No address for (%f, %f)", latitude, longitude)
        address = classify_address(found, query=f"location ({latitude}, {longitude})")
        logger.info("Resolved (%f, %f) → '%s'", latitude, longitude, address)
        return address

    async def _fetch(self, url: str, target: ResponseParserPort) -> None:
        async with self._http_client() as client:
            await fetch_and_decode(
                client, url, target, strip_array_wrapper=self._strip_array_wrapper
            )

    @asynccontextmanager
    async def _http_client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(follow_redirects=True) as client:
            yield client
