"""Threaded Session Store — runs a blocking store's calls on worker threads.

Invariants:
    - The event loop thread never executes blocking store code
    - Results (and exceptions) come back to the awaiting task unchanged
    - With timeout_s set, a slow call raises StoreTimeoutError; the worker
      thread is left to finish on its own (threads cannot be cancelled)

Design Decisions:
    - asyncio.to_thread over a private executor: default loop executor is
      shared, bounded, and shut down with the loop
"""

import asyncio
from collections.abc import Callable
from typing import TypeVar

from session_list.core.paging import PagedSessions, SessionSummary
from session_list.core.repository_protocols import BlockingSessionStore
from session_list.services.bounded_calls import await_bounded

T = TypeVar("T")


class ThreadedSessionStore:
    """Async SessionStore facade over a BlockingSessionStore."""

    def __init__(self, inner: BlockingSessionStore, timeout_s: float | None = None):
        self._inner = inner
        self._timeout_s = timeout_s

    async def _call(self, operation: str, fn: Callable[..., T], *args: object) -> T:
        return await await_bounded(
            operation, asyncio.to_thread(fn, *args), self._timeout_s,
        )

    async def get_sessions_paged(self, page: int, page_size: int) -> PagedSessions:
        return await self._call(
            "get_sessions_paged", self._inner.get_sessions_paged, page, page_size,
        )

    async def get_all_sessions_sorted(self) -> list[SessionSummary]:
        return await self._call(
            "get_all_sessions_sorted", self._inner.get_all_sessions_sorted,
        )

    async def delete_session(self, session_id: str) -> bool:
        return await self._call("delete_session", self._inner.delete_session, session_id)

    async def update_session_starred(self, session_id: str, is_starred: bool) -> bool:
        return await self._call(
            "update_session_starred", self._inner.update_session_starred,
            session_id, is_starred,
        )

    async def rename_title(self, session_id: str, new_title: str) -> bool:
        return await self._call("rename_title", self._inner.rename_title, session_id, new_title)
