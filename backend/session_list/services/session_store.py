"""SQL Session Store — SessionStore over SQLAlchemy async sessions.

Invariants:
    - Sorted order: created_at descending, id descending on ties (matches InMemorySessionStore)
    - get_sessions_paged counts first, then fetches one page: never loads the full table
    - Pages are clamped into [1, total_pages]; empty table → page 1 of 0
    - Mutations return False when no row matched; they bump updated_at on success
    - rename_title with an empty (trimmed) title returns False without a DB round-trip
    - Every DB failure surfaces as DatabaseError (via DatabaseSessionManager)

Design Decisions:
    - Core UPDATE/DELETE statements + rowcount over load-then-modify: one round-trip,
      no ORM identity map to keep in sync
    - Rows converted to SessionSummary before leaving the session (no lazy loads later)
    - Optional timeout wraps every call that touches the database; slow calls
      raise StoreTimeoutError
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import delete, func, select, update

from session_list.core.errors import SessionValidationError
from session_list.core.paging import (
    PagedSessions, SessionSummary, clamp_page, total_pages_for,
)
from session_list.core.session_rules import check_page_size, normalize_title
from session_list.infrastructure.database import DatabaseSessionManager
from session_list.models.session import ChatSession
from session_list.services.bounded_calls import await_bounded

logger = logging.getLogger(__name__)

_ORDERING = (ChatSession.created_at.desc(), ChatSession.id.desc())


class SqlSessionStore:
    """Persistent SessionStore backed by the chat_sessions table."""

    def __init__(self, db: DatabaseSessionManager, timeout_s: float | None = None):
        self._db = db
        self._timeout_s = timeout_s

    # --- Queries --------------------------------------------------------------

    async def get_sessions_paged(self, page: int, page_size: int) -> PagedSessions:
        check_page_size(page_size)
        return await await_bounded(
            "get_sessions_paged", self._fetch_page(page, page_size), self._timeout_s,
        )

    async def _fetch_page(self, page: int, page_size: int) -> PagedSessions:
        async with self._db.session() as db:
            total = (await db.execute(
                select(func.count()).select_from(ChatSession),
            )).scalar_one()
            if total == 0:
                return PagedSessions(
                    sessions=(), current_page=1, total_pages=0,
                    total_sessions=0, page_size=page_size,
                )
            total_pages = total_pages_for(total, page_size)
            valid_page = clamp_page(page, total_pages)
            result = await db.execute(
                select(ChatSession)
                .order_by(*_ORDERING)
                .limit(page_size)
                .offset((valid_page - 1) * page_size),
            )
            rows = result.scalars().all()
            return PagedSessions(
                sessions=tuple(r.to_summary() for r in rows),
                current_page=valid_page,
                total_pages=total_pages,
                total_sessions=total,
                page_size=page_size,
            )

    async def get_all_sessions_sorted(self) -> list[SessionSummary]:
        return await await_bounded(
            "get_all_sessions_sorted", self._fetch_sorted(), self._timeout_s,
        )

    async def _fetch_sorted(self, starred_only: bool = False) -> list[SessionSummary]:
        query = select(ChatSession).order_by(*_ORDERING)
        if starred_only:
            query = query.where(ChatSession.is_starred.is_(True))
        async with self._db.session() as db:
            result = await db.execute(query)
            return [r.to_summary() for r in result.scalars().all()]

    async def get_starred_sessions(self) -> list[SessionSummary]:
        return await await_bounded(
            "get_starred_sessions", self._fetch_sorted(starred_only=True), self._timeout_s,
        )

    async def get_session(self, session_id: str) -> SessionSummary | None:
        return await await_bounded(
            "get_session", self._fetch_one(session_id), self._timeout_s,
        )

    async def _fetch_one(self, session_id: str) -> SessionSummary | None:
        async with self._db.session() as db:
            row = await db.get(ChatSession, session_id)
            return row.to_summary() if row else None

    # --- Mutations ------------------------------------------------------------

    async def create_session(
        self, title: str, *, session_id: str | None = None,
        project_id: str | None = None, created_at: datetime | None = None,
    ) -> SessionSummary:
        clean = normalize_title(title)
        if not clean:
            raise SessionValidationError("title cannot be empty", "title")
        now = created_at or datetime.now(timezone.utc)
        row = ChatSession(
            title=clean, project_id=project_id, created_at=now, updated_at=now,
        )
        if session_id:
            row.id = session_id
        return await await_bounded("create_session", self._insert(row), self._timeout_s)

    async def _insert(self, row: ChatSession) -> SessionSummary:
        async with self._db.session() as db:
            db.add(row)
            await db.commit()
            await db.refresh(row)
            logger.info("Session created", extra={"session_id": row.id})
            return row.to_summary()

    async def delete_session(self, session_id: str) -> bool:
        return await await_bounded(
            "delete_session", self._delete(session_id), self._timeout_s,
        )

    async def _delete(self, session_id: str) -> bool:
        async with self._db.session() as db:
            result = await db.execute(
                delete(ChatSession).where(ChatSession.id == session_id),
            )
            await db.commit()
            deleted = result.rowcount > 0
        logger.debug(
            f"Delete session matched={deleted}",
            extra={"session_id": session_id, "operation": "delete"},
        )
        return deleted

    async def update_session_starred(self, session_id: str, is_starred: bool) -> bool:
        return await await_bounded(
            "update_session_starred",
            self._update(session_id, is_starred=is_starred),
            self._timeout_s,
        )

    async def rename_title(self, session_id: str, new_title: str) -> bool:
        clean = normalize_title(new_title)
        if not clean:
            return False
        return await await_bounded(
            "rename_title", self._update(session_id, title=clean), self._timeout_s,
        )

    async def _update(self, session_id: str, **values: object) -> bool:
        async with self._db.session() as db:
            result = await db.execute(
                update(ChatSession)
                .where(ChatSession.id == session_id)
                .values(updated_at=datetime.now(timezone.utc), **values),
            )
            await db.commit()
            return result.rowcount > 0
