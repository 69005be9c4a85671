"""Session List Controller — paged view, sidebar cache, and mutations over a SessionStore.

Invariants:
    - Public methods are synchronous, return immediately, and never raise
    - Every state write goes through _set(), which drops writes once the scope is cancelled
    - is_loading is True exactly while at least one page load is pending; the pending
      counter is decremented in a finally block (or right away when the scope drops
      the load) so no path leaves it stuck
    - error_message is the only channel for surfaced failures; sidebar failures are silent
    - A mutation that applies (store returns True) always triggers refresh(); a mutation
      that does not apply never does

Design Decisions:
    - Overlapping page loads are NOT sequenced: whichever completes last wins,
      even if it was dispatched first.
      The user-visible effect is bounded to a page flicker and the next
      refresh() re-syncs.
    - Sidebar cache fetches the sorted list once and derives both the truncated
      list and the total count from it (no second round-trip)
    - Mutations do not touch is_loading: they never block the paged view
"""

import logging
from collections.abc import Awaitable, Callable
from functools import partial

from session_list.core.domain_types import (
    MAX_SIDEBAR_SESSIONS, SESSIONS_PER_PAGE, OperationLabel, ViewField,
)
from session_list.core.paging import PagedSessions, SessionSummary
from session_list.core.repository_protocols import (
    ErrorTranslator, SessionStore, StringLookup,
)
from session_list.core.view_state import ViewState
from session_list.services.refresh_events import RefreshEventBus
from session_list.services.task_scope import TaskScope
from session_list.services.view_state_store import Listener, ObservableViewState

logger = logging.getLogger(__name__)


class SessionListController:
    """View-state holder for the sessions screen and sidebar."""

    MAX_SIDEBAR_SESSIONS = MAX_SIDEBAR_SESSIONS

    def __init__(
        self,
        scope: TaskScope,
        store: SessionStore,
        strings: StringLookup,
        translator: ErrorTranslator,
        sessions_per_page: int = SESSIONS_PER_PAGE,
        max_sidebar_sessions: int = MAX_SIDEBAR_SESSIONS,
    ):
        self._scope = scope
        self._store = store
        self._strings = strings
        self._translator = translator
        self.sessions_per_page = sessions_per_page
        self.max_sidebar_sessions = max_sidebar_sessions
        self._view = ObservableViewState()
        self._pending_loads = 0

        self.load_sessions(1)
        self.load_recent_sessions()

    # --- Observable state -----------------------------------------------------

    @property
    def paged_sessions(self) -> PagedSessions | None:
        return self._view.current.paged_sessions

    @property
    def is_loading(self) -> bool:
        return self._view.current.is_loading

    @property
    def error_message(self) -> str | None:
        return self._view.current.error_message

    @property
    def recent_sessions(self) -> tuple[SessionSummary, ...]:
        return self._view.current.recent_sessions

    @property
    def total_session_count(self) -> int:
        return self._view.current.total_session_count

    def snapshot(self) -> ViewState:
        return self._view.current

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns the unsubscribe callable."""
        return self._view.subscribe(listener)

    def listen_for_refresh(self, bus: RefreshEventBus) -> Callable[[], None]:
        """Refresh on every SessionsRefreshRequested until the scope is cancelled."""
        remove = bus.subscribe(lambda event: self.refresh())
        self._scope.on_cancel(remove)
        return remove

    # --- Paged view -----------------------------------------------------------

    def load_sessions(self, page: int = 1) -> None:
        """Load one page. Loading flag and error reset happen before dispatch."""
        self._pending_loads += 1
        self._set(ViewField.IS_LOADING, True)
        self._set(ViewField.ERROR_MESSAGE, None)
        task = self._scope.launch(self._load_page(page), name=f"load-sessions-p{page}")
        if task is None:
            self._pending_loads -= 1
            self._set(ViewField.IS_LOADING, self._pending_loads > 0)

    async def _load_page(self, page: int) -> None:
        logger.debug("Loading sessions page %s", page, extra={"page": page})
        try:
            result = await self._store.get_sessions_paged(page, self.sessions_per_page)
            self._set(ViewField.PAGED_SESSIONS, result)
        except Exception as e:
            logger.warning(
                f"Failed to load sessions page {page}: {e}",
                extra={"page": page, "operation": OperationLabel.LOADING.value},
            )
            self._set(
                ViewField.ERROR_MESSAGE,
                self._translate(e, OperationLabel.LOADING, "sessions.error.loading"),
            )
        finally:
            self._pending_loads -= 1
            self._set(ViewField.IS_LOADING, self._pending_loads > 0)

    def refresh(self) -> None:
        """Reload the current page and the sidebar cache, independently."""
        paged = self.paged_sessions
        self.load_sessions(paged.current_page if paged else 1)
        self.load_recent_sessions()

    def next_page(self) -> None:
        paged = self.paged_sessions
        if paged and paged.has_next_page:
            self.load_sessions(paged.current_page + 1)

    def previous_page(self) -> None:
        paged = self.paged_sessions
        if paged and paged.has_previous_page:
            self.load_sessions(paged.current_page - 1)

    def clear_error(self) -> None:
        self._set(ViewField.ERROR_MESSAGE, None)

    # --- Sidebar cache --------------------------------------------------------

    def load_recent_sessions(self) -> None:
        """Refresh the sidebar cache. Failures are never shown to the user."""
        self._scope.launch(self._load_recent(), name="load-recent-sessions")

    async def _load_recent(self) -> None:
        try:
            sessions = await self._store.get_all_sessions_sorted()
        except Exception as e:
            logger.debug(f"Sidebar refresh failed (ignored): {e}")
            return
        self._set(
            ViewField.RECENT_SESSIONS, tuple(sessions[: self.max_sidebar_sessions]),
        )
        self._set(ViewField.TOTAL_SESSION_COUNT, len(sessions))

    # --- Mutations ------------------------------------------------------------

    def delete_session(self, session_id: str) -> None:
        self._launch_mutation(
            partial(self._store.delete_session, session_id),
            session_id=session_id,
            label=OperationLabel.DELETING,
            not_applied_key="sessions.error.not.found",
            fallback_key="sessions.error.deleting",
        )

    def update_session_starred(self, session_id: str, is_starred: bool) -> None:
        self._launch_mutation(
            partial(self._store.update_session_starred, session_id, is_starred),
            session_id=session_id,
            label=OperationLabel.UPDATING,
            not_applied_key="sessions.error.not.found",
            fallback_key="sessions.error.updating",
        )

    def rename_session(self, session_id: str, new_title: str) -> None:
        # not-applied key differs from delete/star: an empty title also lands here
        self._launch_mutation(
            partial(self._store.rename_title, session_id, new_title),
            session_id=session_id,
            label=OperationLabel.RENAMING,
            not_applied_key="sessions.error.rename.failed",
            fallback_key="sessions.error.renaming",
        )

    def _launch_mutation(
        self,
        call: Callable[[], Awaitable[bool]],
        *,
        session_id: str,
        label: OperationLabel,
        not_applied_key: str,
        fallback_key: str,
    ) -> None:
        async def _run() -> None:
            logger.debug(
                f"Dispatching {label.value}",
                extra={"session_id": session_id, "operation": label.value},
            )
            try:
                applied = await call()
            except Exception as e:
                logger.warning(
                    f"Failed {label.value} {session_id}: {e}",
                    extra={"session_id": session_id, "operation": label.value},
                )
                self._set(
                    ViewField.ERROR_MESSAGE,
                    self._translate(e, label, fallback_key),
                )
                return
            if applied:
                self.refresh()
            else:
                self._set(
                    ViewField.ERROR_MESSAGE, self._strings.get_string(not_applied_key),
                )

        self._scope.launch(_run(), name=f"{label.name.lower()}-{session_id}")

    # --- Helpers --------------------------------------------------------------

    def _translate(self, error: Exception, label: OperationLabel, fallback_key: str) -> str:
        return self._translator.get_user_friendly_error(
            error, label.value, self._strings.get_string(fallback_key),
        )

    def _set(self, name: ViewField, value: object) -> None:
        if not self._scope.is_active:
            return
        self._view.set(name, value)
