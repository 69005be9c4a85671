"""Bounded Store Calls — optional per-call timeout shared by store implementations.

Invariants:
    - timeout_s=None awaits the work with no bound
    - A timeout always surfaces as StoreTimeoutError (category TIMEOUT), never
      asyncio.TimeoutError, so the error translator can name it
"""

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from session_list.core.errors import ErrorContext, StoreTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def await_bounded(
    operation: str, work: Awaitable[T], timeout_s: float | None,
) -> T:
    """Await work, converting a timeout into StoreTimeoutError."""
    if timeout_s is None:
        return await work
    try:
        return await asyncio.wait_for(work, timeout_s)
    except asyncio.TimeoutError:
        logger.warning(
            f"Store {operation} exceeded {timeout_s}s",
            extra={"operation": operation},
        )
        raise StoreTimeoutError(operation, timeout_s, ErrorContext(operation=operation))
