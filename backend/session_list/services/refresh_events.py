"""Refresh Events — in-process bus for "the session list is stale" notifications.

Invariants:
    - publish() is synchronous and never raises; handlers decide how to react
    - Handlers are called in subscription order; one failing handler does not stop the rest
    - Unsubscribing twice is harmless

Design Decisions:
    - Any component that changes sessions outside the controller (creation route,
      imports, project moves) publishes SessionsRefreshRequested instead of
      holding a controller reference
    - reason is free text for logs only; no handler branches on it
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionsRefreshRequested:
    """Request to re-sync every session list view."""
    reason: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def details(self) -> str:
        if self.reason:
            return f"Sessions refresh requested: {self.reason}"
        return "Sessions refresh requested"


RefreshHandler = Callable[[SessionsRefreshRequested], None]


class RefreshEventBus:
    """Fan-out of SessionsRefreshRequested to subscribed handlers."""

    def __init__(self) -> None:
        self._handlers: list[RefreshHandler] = []

    def subscribe(self, handler: RefreshHandler) -> Callable[[], None]:
        self._handlers.append(handler)

        def _remove() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return _remove

    def publish(self, event: SessionsRefreshRequested) -> None:
        logger.debug(event.details)
        for handler in list(self._handlers):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Refresh handler failed: {e}", exc_info=True)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)
