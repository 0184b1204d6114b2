"""Request deadline — run_with_deadline returns results or raises OperationTimeoutError."""

import asyncio

import pytest

from friendgraph.core.errors import OperationTimeoutError
from friendgraph.services.deadline import run_with_deadline


async def test_returns_result_within_deadline():
    async def fast():
        return {"a@b.com"}

    assert await run_with_deadline(fast(), "resolve_recipients", 1.0) == {"a@b.com"}


async def test_slow_call_raises_timeout_and_is_cancelled():
    cancelled = asyncio.Event()

    async def slow():
        try:
            await asyncio.sleep(5)
        except asyncio.CancelledError:
            cancelled.set()
            raise

    with pytest.raises(OperationTimeoutError) as exc_info:
        await run_with_deadline(slow(), "list_friends", 0.01)

    assert exc_info.value.operation == "list_friends"
    assert exc_info.value.http_status == 504
    assert cancelled.is_set()


async def test_domain_errors_pass_through():
    async def failing():
        raise ValueError("boom")

    with pytest.raises(ValueError):
        await run_with_deadline(failing(), "block", 1.0)
