"""Boundary Protocols — contracts between the controller and its collaborators.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, stores and fakes need no inheritance
    - Async in SessionStore: implementations do IO, the controller awaits them
      inside its own tasks; blocking stores are adapted by services/threaded_store.py
    - StringLookup and ErrorTranslator are sync: pure lookups, must never fail
"""

from datetime import datetime
from typing import Protocol

from session_list.core.paging import PagedSessions, SessionSummary


class SessionStore(Protocol):
    """Contract for session persistence — implemented by shell."""
    async def get_sessions_paged(self, page: int, page_size: int) -> PagedSessions: ...
    async def get_all_sessions_sorted(self) -> list[SessionSummary]: ...
    async def delete_session(self, session_id: str) -> bool: ...
    async def update_session_starred(self, session_id: str, is_starred: bool) -> bool: ...
    async def rename_title(self, session_id: str, new_title: str) -> bool: ...


class SessionCatalog(SessionStore, Protocol):
    """SessionStore plus the lookups and creation used outside the controller."""
    async def get_session(self, session_id: str) -> SessionSummary | None: ...
    async def get_starred_sessions(self) -> list[SessionSummary]: ...
    async def create_session(
        self, title: str, *, session_id: str | None = None,
        project_id: str | None = None, created_at: datetime | None = None,
    ) -> SessionSummary: ...


class BlockingSessionStore(Protocol):
    """Same contract for synchronous backends (wrapped by ThreadedSessionStore)."""
    def get_sessions_paged(self, page: int, page_size: int) -> PagedSessions: ...
    def get_all_sessions_sorted(self) -> list[SessionSummary]: ...
    def delete_session(self, session_id: str) -> bool: ...
    def update_session_starred(self, session_id: str, is_starred: bool) -> bool: ...
    def rename_title(self, session_id: str, new_title: str) -> bool: ...


class StringLookup(Protocol):
    """Contract for localized text lookup. Absent keys are the lookup's concern."""
    def get_string(self, key: str) -> str: ...


class ErrorTranslator(Protocol):
    """Contract for turning a raised failure into a displayable message."""
    def get_user_friendly_error(
        self, error: BaseException, context: str, fallback: str,
    ) -> str: ...
