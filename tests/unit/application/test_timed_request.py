"""Tests for run_with_timeout."""

import asyncio
import time

import pytest

from geoclient.application.timed_request import run_with_timeout
from geoclient.domain.errors import GeocodeTimeoutError
from geoclient.domain.value_objects.location import Location


async def _value_after(delay, value):
    await asyncio.sleep(delay)
    return value


@pytest.mark.asyncio
async def test_returns_value_when_work_wins():
    result = await run_with_timeout(_value_after(0.01, Location(1.0, 2.0)), timeout=1.0)
    assert result == Location(1.0, 2.0)


@pytest.mark.asyncio
async def test_generic_over_result_type():
    assert await run_with_timeout(_value_after(0, "Paris"), timeout=1.0) == "Paris"
    assert await run_with_timeout(_value_after(0, None), timeout=1.0) is None


@pytest.mark.asyncio
async def test_work_errors_propagate_unchanged():
    async def boom():
        raise KeyError("lat")

    with pytest.raises(KeyError):
        await run_with_timeout(boom(), timeout=1.0)


@pytest.mark.asyncio
async def test_timeout_raises_after_budget():
    start = time.monotonic()
    with pytest.raises(GeocodeTimeoutError) as exc_info:
        await run_with_timeout(_value_after(5, "late"), timeout=0.2)
    elapsed = time.monotonic() - start

    assert exc_info.value.timeout == 0.2
    assert 0.18 <= elapsed < 0.2 + 0.25


@pytest.mark.asyncio
async def test_timeout_cancels_work():
    state = {"cancelled": False, "finished": False}

    async def slow():
        try:
            await asyncio.sleep(5)
            state["finished"] = True
        except asyncio.CancelledError:
            state["cancelled"] = True
            raise

    with pytest.raises(GeocodeTimeoutError):
        await run_with_timeout(slow(), timeout=0.05)

    assert state["cancelled"] is True
    assert state["finished"] is False


@pytest.mark.asyncio
@pytest.mark.parametrize("timeout", [0, -1.0])
async def test_non_positive_timeout_rejected(timeout):
    with pytest.raises(ValueError):
        await run_with_timeout(_value_after(0, "x"), timeout=timeout)
