"""Observable View State — single mutable holder of ViewState with change listeners.

Invariants:
    - Exactly one field changes per set(); listeners run after the swap
    - Listeners are called synchronously, in subscription order, on the writer's thread
    - A failing listener is logged and skipped; it never breaks the write or other listeners
    - Writing an equal value is a no-op (no notification)

Design Decisions:
    - Plain callback registry over a reactive library: any presentation layer
      (SSE route, CLI, tests) subscribes without a runtime dependency
    - subscribe() returns the unsubscribe callable (no handle objects to track)
"""

import logging
from collections.abc import Callable

from session_list.core.domain_types import ViewField
from session_list.core.view_state import ViewState

logger = logging.getLogger(__name__)

Listener = Callable[[ViewField, ViewState], None]


class ObservableViewState:
    """Holds the current ViewState and fans out changes."""

    def __init__(self, initial: ViewState | None = None):
        self._state = initial or ViewState()
        self._listeners: list[Listener] = []

    @property
    def current(self) -> ViewState:
        return self._state

    def set(self, name: ViewField, value: object) -> None:
        if getattr(self._state, name.value) == value:
            return
        self._state = self._state.with_field(name, value)
        for listener in list(self._listeners):
            try:
                listener(name, self._state)
            except Exception as e:
                logger.error(
                    f"View-state listener failed on {name.value}: {e}",
                    exc_info=True,
                )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    @property
    def listener_count(self) -> int:
        return len(self._listeners)
