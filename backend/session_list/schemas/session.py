"""Session Schemas — Pydantic models for the session list API boundary.

Invariants:
    - SessionCreate.title: 1-256 chars after stripping
    - TitleUpdate.title is NOT stripped or length-checked here: the store normalizes it
      and an unusable title comes back as the rename-failed message, same as any client
    - ViewStateResponse mirrors core.view_state.ViewState field-for-field

Design Decisions:
    - from_attributes=True: responses are built straight from core dataclasses
    - Derived pagination flags included in the payload so clients never recompute them
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from session_list.core.domain_types import SESSION_TITLE_MAX_LENGTH
from session_list.core.paging import PagedSessions
from session_list.core.view_state import ViewState


class SessionCreate(BaseModel):
    """Session creation — validates title length and whitespace."""
    title: str = Field(min_length=1, max_length=SESSION_TITLE_MAX_LENGTH)
    project_id: str | None = Field(None, max_length=36)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class StarredUpdate(BaseModel):
    is_starred: bool


class TitleUpdate(BaseModel):
    title: str


class SessionSummaryResponse(BaseModel):
    """One session as listed in the page or the sidebar."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    is_starred: bool
    created_at: datetime
    updated_at: datetime
    project_id: str | None = None
    directive_id: str | None = None
    sort_order: int = 0


class PagedSessionsResponse(BaseModel):
    sessions: list[SessionSummaryResponse]
    current_page: int
    total_pages: int
    total_sessions: int
    page_size: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def from_page(cls, page: PagedSessions) -> "PagedSessionsResponse":
        return cls(
            sessions=[SessionSummaryResponse.model_validate(s) for s in page.sessions],
            current_page=page.current_page,
            total_pages=page.total_pages,
            total_sessions=page.total_sessions,
            page_size=page.page_size,
            has_next_page=page.has_next_page,
            has_previous_page=page.has_previous_page,
        )


class ViewStateResponse(BaseModel):
    """Full session list view-state snapshot."""
    paged_sessions: PagedSessionsResponse | None
    is_loading: bool
    error_message: str | None
    recent_sessions: list[SessionSummaryResponse]
    total_session_count: int

    @classmethod
    def from_view_state(cls, state: ViewState) -> "ViewStateResponse":
        return cls(
            paged_sessions=(
                PagedSessionsResponse.from_page(state.paged_sessions)
                if state.paged_sessions is not None else None
            ),
            is_loading=state.is_loading,
            error_message=state.error_message,
            recent_sessions=[
                SessionSummaryResponse.model_validate(s) for s in state.recent_sessions
            ],
            total_session_count=state.total_session_count,
        )
