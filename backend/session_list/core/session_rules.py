"""Session Rules — input normalization shared by every SessionStore.

Invariants:
    - Titles are trimmed then capped at SESSION_TITLE_MAX_LENGTH characters
    - A title that is empty after trimming is rejected (rename reports not-applied)
    - page_size must be >= 1; pages themselves are clamped, never rejected
"""

from session_list.core.domain_types import SESSION_TITLE_MAX_LENGTH
from session_list.core.errors import SessionValidationError


def normalize_title(title: str) -> str:
    """Trim and cap a title; empty string means the title is unusable."""
    return title.strip()[:SESSION_TITLE_MAX_LENGTH]


def check_page_size(page_size: int) -> None:
    if page_size < 1:
        raise SessionValidationError(
            f"page_size must be >= 1, got {page_size}", "page_size",
        )
