"""
Tests for the cooperative cancellation token.
"""
import asyncio

import pytest

from trainer_app.core.cancellation import CancellationToken, OperationCancelled


@pytest.mark.asyncio
async def test_sleep_returns_after_delay():
    token = CancellationToken()
    await token.sleep(0.01)
    assert not token.cancelled


@pytest.mark.asyncio
async def test_sleep_raises_when_cancelled_midway():
    token = CancellationToken()
    loop = asyncio.get_running_loop()
    loop.call_later(0.01, token.cancel)

    with pytest.raises(OperationCancelled):
        await asyncio.wait_for(token.sleep(10), timeout=1.0)


@pytest.mark.asyncio
async def test_sleep_on_cancelled_token_raises_immediately():
    token = CancellationToken()
    token.cancel()
    with pytest.raises(OperationCancelled):
        await token.sleep(10)


@pytest.mark.asyncio
async def test_guard_returns_result():
    token = CancellationToken()

    async def compute():
        await asyncio.sleep(0)
        return 42

    assert await token.guard(compute()) == 42


@pytest.mark.asyncio
async def test_guard_cancels_pending_work():
    token = CancellationToken()
    finished = asyncio.Event()

    async def never_done():
        try:
            await asyncio.sleep(10)
        finally:
            finished.set()

    asyncio.get_running_loop().call_later(0.01, token.cancel)
    with pytest.raises(OperationCancelled):
        await token.guard(never_done())

    await asyncio.wait_for(finished.wait(), timeout=1.0)


def test_raise_if_cancelled():
    token = CancellationToken()
    token.raise_if_cancelled()
    token.cancel()
    assert token.cancelled
    with pytest.raises(OperationCancelled):
        token.raise_if_cancelled()
