"""Timed request — race one unit of work against a fixed time budget."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, TypeVar

from geoclient.domain.errors import GeocodeTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_with_timeout(work: Awaitable[T], timeout: float) -> T:
    """Await *work*, giving up after *timeout* seconds.

    The work runs as its own task; whichever of {work, timer} finishes first
    decides the outcome. On timeout the task is cancelled, which aborts the
    in-flight HTTP request and releases its connection.

    Args:
        work: awaitable producing the result (Location, address, ...).
        timeout: budget in seconds, must be positive.

    Returns:
        Whatever *work* returned. Exceptions raised by *work* propagate.

    Raises:
        GeocodeTimeoutError: if the timer fires first.
        ValueError: if timeout is not positive.
    """
    if timeout <= 0:
        if asyncio.iscoroutine(work):
            work.close()
        raise ValueError(f"timeout must be positive, got {timeout!r}")

    try:
        return await asyncio.wait_for(work, timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning("Request timed out after %.2fs", timeout)
        raise GeocodeTimeoutError(timeout) from None
