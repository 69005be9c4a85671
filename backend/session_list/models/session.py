"""ChatSession ORM — one row per chat session shown in the session list.

Invariants:
    - id is a 36-char string primary key (uuid4 text by default)
    - title is non-nullable, at most SESSION_TITLE_MAX_LENGTH chars
    - created_at orders the list (newest first); updated_at bumps on every mutation
    - is_starred defaults to False, sort_order to 0

Design Decisions:
    - String id over UUID column: ids travel as text through the controller and
      SQLite has no native UUID type
    - to_summary() converts to the core dataclass so nothing above the store
      holds a live ORM object
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from session_list.core.domain_types import SESSION_TITLE_MAX_LENGTH, SessionId
from session_list.core.paging import SessionSummary
from session_list.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ChatSession(Base):
    """Persisted chat session (list-relevant columns only)."""
    __tablename__ = "chat_sessions"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    title: Mapped[str] = mapped_column(
        String(SESSION_TITLE_MAX_LENGTH), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    project_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    directive_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    is_starred: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    sort_order: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )

    def to_summary(self) -> SessionSummary:
        return SessionSummary(
            id=SessionId(self.id),
            title=self.title,
            created_at=self.created_at,
            updated_at=self.updated_at,
            is_starred=bool(self.is_starred),
            project_id=self.project_id,
            directive_id=self.directive_id,
            sort_order=self.sort_order,
        )
