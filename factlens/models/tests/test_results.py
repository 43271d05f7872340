import asyncio

import pytest

from factlens.models import Fallible, Recoverable, attempt


def test_recoverable_ok_is_not_degraded():
    result = Recoverable.ok("value")
    assert result.value == "value"
    assert not result.degraded


def test_recoverable_fallback_keeps_value_and_error():
    error = RuntimeError("down")
    result = Recoverable.fallback("fallback", error)
    assert result.value == "fallback"
    assert result.degraded
    assert result.error is error


def test_fallible_unwrap_reraises():
    error = ValueError("bad")
    with pytest.raises(ValueError, match="bad"):
        Fallible(error=error).unwrap()
    assert Fallible(value=3).unwrap() == 3


@pytest.mark.asyncio
async def test_attempt_captures_errors():
    async def fail():
        raise RuntimeError("boom")

    result = await attempt(fail)

    assert result.failed
    assert isinstance(result.error, RuntimeError)


@pytest.mark.asyncio
async def test_attempt_captures_timeout():
    async def slow():
        await asyncio.sleep(1)

    result = await attempt(slow, timeout=0.01)

    assert result.failed
    assert isinstance(result.error, asyncio.TimeoutError)


@pytest.mark.asyncio
async def test_attempt_returns_value():
    async def ok():
        return [1, 2]

    result = await attempt(ok, timeout=1)

    assert not result.failed
    assert result.unwrap() == [1, 2]
