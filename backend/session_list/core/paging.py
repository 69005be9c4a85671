"""Paging — session summaries, page containers, and pure pagination math.

Invariants:
    - PagedSessions is immutable; a reload produces a new instance
    - current_page is always >= 1, even for an empty store
    - Requested pages outside [1, total_pages] are clamped, never rejected
    - paginate() expects input already sorted by recency (newest first)

Design Decisions:
    - Frozen dataclasses over Pydantic: core stays dependency-free, API schemas
      convert at the boundary (schemas/session.py)
    - Pagination math shared by every store implementation so SQL and in-memory
      stores agree on edge cases
"""

from dataclasses import dataclass
from datetime import datetime

from session_list.core.domain_types import SessionId


@dataclass(frozen=True)
class SessionSummary:
    """Read-only view of one chat session as the list needs it."""

    id: SessionId
    title: str
    created_at: datetime
    updated_at: datetime
    is_starred: bool = False
    project_id: str | None = None
    directive_id: str | None = None
    sort_order: int = 0


@dataclass(frozen=True)
class PagedSessions:
    """One page of sessions plus pagination info."""

    sessions: tuple[SessionSummary, ...]
    current_page: int
    total_pages: int
    total_sessions: int
    page_size: int

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    @property
    def is_empty(self) -> bool:
        return not self.sessions

    @property
    def session_ids(self) -> list[str]:
        return [s.id for s in self.sessions]


def total_pages_for(total: int, page_size: int) -> int:
    """Ceiling division; 0 sessions means 0 pages."""
    return (total + page_size - 1) // page_size


def clamp_page(page: int, total_pages: int) -> int:
    """Coerce a requested page into [1, total_pages] (1 when there are no pages)."""
    if total_pages <= 0:
        return 1
    return max(1, min(page, total_pages))


def paginate(
    sorted_sessions: list[SessionSummary], page: int, page_size: int,
) -> PagedSessions:
    """Slice a recency-sorted list into one page.

    Empty input yields page 1 of 0 with no sessions. Otherwise the requested
    page is clamped, so page 99 of a 3-page list returns page 3.
    """
    total = len(sorted_sessions)
    if total == 0:
        return PagedSessions(
            sessions=(), current_page=1, total_pages=0,
            total_sessions=0, page_size=page_size,
        )

    total_pages = total_pages_for(total, page_size)
    valid_page = clamp_page(page, total_pages)
    start = (valid_page - 1) * page_size
    end = min(start + page_size, total)
    return PagedSessions(
        sessions=tuple(sorted_sessions[start:end]),
        current_page=valid_page,
        total_pages=total_pages,
        total_sessions=total,
        page_size=page_size,
    )
