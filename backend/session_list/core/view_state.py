"""View State — immutable snapshot of everything the presentation layer renders.

Invariants:
    - ViewState is frozen: every change produces a new snapshot (dataclasses.replace)
    - paged_sessions is None until the first successful page load
    - recent_sessions never holds more than MAX_SIDEBAR_SESSIONS entries
    - is_loading is derived from pending page loads, never set directly by callers

Design Decisions:
    - Snapshot + replace over mutable fields: a listener can never observe a
      half-applied update, each write swaps exactly one field
    - No serialization here: schemas/session.py converts snapshots at the API boundary
"""

from dataclasses import dataclass, field, replace

from session_list.core.domain_types import ViewField
from session_list.core.paging import PagedSessions, SessionSummary


@dataclass(frozen=True)
class ViewState:
    """Aggregate view-state for the session list."""

    paged_sessions: PagedSessions | None = None
    is_loading: bool = False
    error_message: str | None = None
    recent_sessions: tuple[SessionSummary, ...] = field(default_factory=tuple)
    total_session_count: int = 0

    def with_field(self, name: ViewField, value: object) -> "ViewState":
        """Return a copy with one field replaced."""
        return replace(self, **{name.value: value})
