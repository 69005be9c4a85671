"""Task Scope — owner of fire-and-forget asyncio tasks launched by controllers.

Invariants:
    - launch() never blocks and never raises; a dropped coroutine is closed
      (inactive scope, or called from a thread without a running loop)
    - After cancel(), is_active is False forever and launch() is a no-op
    - Every launched task is tracked until done; finished tasks are dropped
    - A task failure is logged, never re-raised into the event loop

Design Decisions:
    - Explicit object over a bare event loop: callers (FastAPI lifespan, tests)
      decide when the scope dies, controllers only submit work
    - is_active doubles as the cancellation token: controllers check it before
      every state write, so a task that swallowed CancelledError still cannot mutate
    - join() loops until quiescent because finishing tasks may launch new ones
      (a successful mutation launches a refresh)
"""

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

logger = logging.getLogger(__name__)


class TaskScope:
    """Tracks and cancels a group of background tasks."""

    def __init__(self, name: str = "session-list"):
        self.name = name
        self._tasks: set[asyncio.Task] = set()
        self._active = True
        self._on_cancel: list[Callable[[], None]] = []

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def launch(
        self, coro: Coroutine[Any, Any, Any], *, name: str | None = None,
    ) -> asyncio.Task | None:
        """Schedule coro on the running loop. Returns None if the scope is dead or no loop runs in this thread."""
        if not self._active:
            coro.close()
            logger.debug("Scope %s inactive, dropped %s", self.name, name)
            return None
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            logger.error("Scope %s: no running event loop, dropped %s", self.name, name)
            return None
        task = loop.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def on_cancel(self, callback: Callable[[], None]) -> None:
        """Register a teardown hook (e.g. event bus unsubscribe)."""
        self._on_cancel.append(callback)

    def cancel(self) -> None:
        """Dispose the scope: stop accepting work and cancel in-flight tasks."""
        if not self._active:
            return
        self._active = False
        for task in list(self._tasks):
            task.cancel()
        for callback in self._on_cancel:
            callback()
        self._on_cancel.clear()
        logger.info("Task scope %s cancelled", self.name)

    async def join(self) -> None:
        """Wait until no tracked task is pending (including tasks launched meanwhile)."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def aclose(self) -> None:
        """Cancel and wait for cancelled tasks to unwind."""
        tasks = list(self._tasks)
        self.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc:
            logger.error(
                "Background task %s failed: %s", task.get_name(), exc,
                exc_info=exc,
            )
