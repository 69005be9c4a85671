"""Paging tests — pure pagination math shared by every store.

Tests cover:
    - Page boundaries for a 25-session list at page size 10
    - Clamping of out-of-range pages (never rejected)
    - Empty input → page 1 of 0, no navigation
    - Derived flags and helpers on PagedSessions
"""

from datetime import datetime, timedelta, timezone

import pytest

from session_list.core.domain_types import SessionId
from session_list.core.paging import (
    PagedSessions, SessionSummary, clamp_page, paginate, total_pages_for,
)

_BASE = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _sessions(count: int) -> list[SessionSummary]:
    """Newest first, like every store returns them."""
    return [
        SessionSummary(
            id=SessionId(f"s{i:02d}"),
            title=f"Session {i}",
            created_at=_BASE + timedelta(minutes=i),
            updated_at=_BASE + timedelta(minutes=i),
        )
        for i in reversed(range(count))
    ]


# --- total_pages_for / clamp_page ---------------------------------------------


@pytest.mark.parametrize("total,size,expected", [
    (0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3),
])
def test_total_pages_is_ceiling_division(total, size, expected):
    assert total_pages_for(total, size) == expected


def test_clamp_page_into_range():
    assert clamp_page(0, 3) == 1
    assert clamp_page(-5, 3) == 1
    assert clamp_page(2, 3) == 2
    assert clamp_page(99, 3) == 3


def test_clamp_page_with_no_pages_is_one():
    assert clamp_page(7, 0) == 1


# --- paginate -----------------------------------------------------------------


def test_first_page_of_25():
    page = paginate(_sessions(25), 1, 10)
    assert len(page.sessions) == 10
    assert page.current_page == 1
    assert page.total_pages == 3
    assert page.total_sessions == 25
    assert page.has_next_page
    assert not page.has_previous_page


def test_last_page_is_partial():
    page = paginate(_sessions(25), 3, 10)
    assert len(page.sessions) == 5
    assert not page.has_next_page
    assert page.has_previous_page
    assert page.session_ids == [f"s{i:02d}" for i in reversed(range(5))]


def test_page_past_end_is_clamped_to_last():
    page = paginate(_sessions(25), 99, 10)
    assert page.current_page == 3
    assert len(page.sessions) == 5


def test_page_zero_is_clamped_to_first():
    page = paginate(_sessions(25), 0, 10)
    assert page.current_page == 1
    assert page.session_ids[0] == "s24"


def test_empty_input_is_page_one_of_zero():
    page = paginate([], 4, 10)
    assert page.current_page == 1
    assert page.total_pages == 0
    assert page.total_sessions == 0
    assert page.is_empty
    assert not page.has_next_page
    assert not page.has_previous_page


def test_paged_sessions_is_immutable():
    page = paginate(_sessions(3), 1, 10)
    with pytest.raises(AttributeError):
        page.current_page = 2  # type: ignore[misc]


def test_paged_sessions_equality_is_by_value():
    a = paginate(_sessions(12), 2, 10)
    b = paginate(_sessions(12), 2, 10)
    assert a == b
    assert isinstance(a, PagedSessions)
