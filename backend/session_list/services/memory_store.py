"""In-Memory Session Store — dict-backed SessionStore for tests, demos, and previews.

Invariants:
    - Same observable semantics as SqlSessionStore (shared paginate + title rules)
    - Sorted order: created_at descending, ties broken by id for determinism
    - Every mutation bumps updated_at; not-found returns False, never raises

Design Decisions:
    - Async methods with no awaits inside: satisfies SessionStore structurally,
      each call is atomic with respect to the event loop
    - fail_with lets tests inject a store failure per operation without mocks
"""

from dataclasses import replace
from datetime import datetime, timezone
from uuid import uuid4

from session_list.core.domain_types import SessionId
from session_list.core.errors import SessionValidationError
from session_list.core.paging import PagedSessions, SessionSummary, paginate
from session_list.core.session_rules import check_page_size, normalize_title


class InMemorySessionStore:
    """SessionStore keeping summaries in a dict keyed by id."""

    def __init__(self, sessions: list[SessionSummary] | None = None):
        self._sessions: dict[str, SessionSummary] = {
            s.id: s for s in (sessions or [])
        }
        self.fail_with: dict[str, BaseException] = {}
        self.calls: list[str] = []

    def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        error = self.fail_with.get(operation)
        if error is not None:
            raise error

    def _sorted(self) -> list[SessionSummary]:
        return sorted(
            self._sessions.values(),
            key=lambda s: (s.created_at, s.id),
            reverse=True,
        )

    async def get_sessions_paged(self, page: int, page_size: int) -> PagedSessions:
        self._enter("get_sessions_paged")
        check_page_size(page_size)
        return paginate(self._sorted(), page, page_size)

    async def get_all_sessions_sorted(self) -> list[SessionSummary]:
        self._enter("get_all_sessions_sorted")
        return self._sorted()

    async def get_session(self, session_id: str) -> SessionSummary | None:
        self._enter("get_session")
        return self._sessions.get(session_id)

    async def get_starred_sessions(self) -> list[SessionSummary]:
        self._enter("get_starred_sessions")
        return [s for s in self._sorted() if s.is_starred]

    async def create_session(
        self, title: str, *, session_id: str | None = None,
        project_id: str | None = None, created_at: datetime | None = None,
    ) -> SessionSummary:
        self._enter("create_session")
        clean = normalize_title(title)
        if not clean:
            raise SessionValidationError("title cannot be empty", "title")
        now = created_at or datetime.now(timezone.utc)
        summary = SessionSummary(
            id=SessionId(session_id or str(uuid4())),
            title=clean, created_at=now, updated_at=now, project_id=project_id,
        )
        self._sessions[summary.id] = summary
        return summary

    async def delete_session(self, session_id: str) -> bool:
        self._enter("delete_session")
        return self._sessions.pop(session_id, None) is not None

    async def update_session_starred(self, session_id: str, is_starred: bool) -> bool:
        self._enter("update_session_starred")
        return self._update(session_id, is_starred=is_starred)

    async def rename_title(self, session_id: str, new_title: str) -> bool:
        self._enter("rename_title")
        clean = normalize_title(new_title)
        if not clean:
            return False
        return self._update(session_id, title=clean)

    def _update(self, session_id: str, **changes: object) -> bool:
        current = self._sessions.get(session_id)
        if current is None:
            return False
        self._sessions[session_id] = replace(
            current, updated_at=datetime.now(timezone.utc), **changes,
        )
        return True
