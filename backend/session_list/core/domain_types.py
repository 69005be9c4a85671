"""Domain Types — identity types, limits, and enums shared across the session list.

Invariants:
    - SessionId wraps the store's string id — never a UUID object (ids come from the store as text)
    - Operation labels are fixed strings handed to the error translator as context
    - View field names are the only keys a view-state listener ever receives

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (SSE + REST payloads)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

SessionId = NewType("SessionId", str)


# ─── Limits ──────────────────────────────────────────────────────

SESSIONS_PER_PAGE = 10
MAX_SIDEBAR_SESSIONS = 50
SESSION_TITLE_MAX_LENGTH = 256


# ─── Enums ───────────────────────────────────────────────────────

class OperationLabel(str, Enum):
    """Context labels passed to the error translator, one per store operation."""
    LOADING = "loading sessions"
    DELETING = "deleting session"
    UPDATING = "updating session"
    RENAMING = "renaming session"


class ViewField(str, Enum):
    """Observable view-state fields — maps 1:1 to ViewState attributes."""
    PAGED_SESSIONS = "paged_sessions"
    IS_LOADING = "is_loading"
    ERROR_MESSAGE = "error_message"
    RECENT_SESSIONS = "recent_sessions"
    TOTAL_SESSION_COUNT = "total_session_count"
