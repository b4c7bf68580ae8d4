"""HTTP fetch-and-decode step shared by every provider."""

from __future__ import annotations

import logging

import httpx

from geoclient.application.ports.response_parser import ResponseParserPort
from geoclient.domain.errors import DecodeError, TransportError

logger = logging.getLogger(__name__)

# Whitespace plus the brackets of a single-element JSON array
_WRAPPER_CHARS = b" \t\r\n[]"


def trim_array_wrapper(body: bytes) -> bytes:
    """Trim surrounding whitespace and square brackets from *body*.

    Some providers answer with ``[{...}]`` instead of ``{...}``; after
    trimming both decode the same way.
    """
    return body.strip(_WRAPPER_CHARS)


async def fetch_and_decode(
    client: httpx.AsyncClient,
    url: str,
    target: ResponseParserPort,
    strip_array_wrapper: bool = True,
) -> None:
    """GET *url* and decode the body into *target*.

    The request carries no timeout of its own; the caller bounds it.
    Success is read off *target* afterwards. An empty payload (including
    an empty array when trimming is on) is not decoded, so *target* stays
    blank.

    Raises:
        TransportError: on network errors, invalid URLs or non-2xx status.
        DecodeError: if ``target.decode`` rejects the body.
    """
    try:
        response = await client.get(url, timeout=None)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        logger.warning("HTTP %d from '%s'", status, url)
        raise TransportError(url, f"HTTP {status}", status_code=status) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Request to '%s' failed: %s", url, exc)
        raise TransportError(url, str(exc) or exc.__class__.__name__) from exc

    body = response.content
    if strip_array_wrapper:
        body = trim_array_wrapper(body)
    if not body:
        # "[]" or an empty body: nothing found, leave the target blank
        logger.debug("Empty payload from '%s'", url)
        return

    try:
        target.decode(body)
    except ValueError as exc:
        logger.warning("Could not decode response from '%s': %s", url, exc)
        raise DecodeError(url, str(exc)) from exc

    logger.debug("Fetched and decoded '%s' (%d bytes)", url, len(body))
