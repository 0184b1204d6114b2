"""Request Deadline — bounds a service call and maps expiry to OperationTimeoutError.

Invariants:
    - The wrapped coroutine is cancelled when the deadline passes; its outstanding
      store call is abandoned and the request transaction is never committed
    - No retry on timeout or cancellation
    - CancelledError from the caller passes through untouched
"""

import asyncio
import logging
from typing import Awaitable, TypeVar

from friendgraph.core.errors import OperationTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_with_deadline(
    awaitable: Awaitable[T], operation: str, seconds: float,
) -> T:
    """Await the call, raising OperationTimeoutError after `seconds`."""
    try:
        return await asyncio.wait_for(awaitable, timeout=seconds)
    except asyncio.TimeoutError:
        logger.warning(
            f"{operation} exceeded its {seconds:g}s deadline",
            extra={"operation": operation},
        )
        raise OperationTimeoutError(operation, seconds)
