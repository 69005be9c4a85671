"""Session List Routes — HTTP presentation layer over SessionListController.

Invariants:
    - Command endpoints return 202 Accepted with the snapshot taken right after dispatch
      (is_loading already True for page loads); results arrive on the SSE stream
    - Routes never await store mutations themselves; the controller owns that work
    - The stream emits the current snapshot first, then the latest snapshot after
      each change; a slow client skips intermediate snapshots, never the newest one
    - Per-client buffering is bounded to one pending snapshot
    - Direct reads (single session, starred list) go to the store, not the view-state

Design Decisions:
    - Runtime read from app.state: one controller per process, swapped by tests
    - SSE over websockets: one-way state push, same headers the agent stream uses
    - Session creation publishes SessionsRefreshRequested instead of calling refresh()
      directly, so every subscribed view re-syncs
"""

import asyncio
import json
import logging

from fastapi import APIRouter, Depends, Path, Request, status
from fastapi.responses import StreamingResponse

from session_list.core.domain_types import ViewField
from session_list.core.errors import ResourceNotFoundError, StoreUnavailableError
from session_list.core.view_state import ViewState
from session_list.schemas.session import (
    SessionCreate, SessionSummaryResponse, StarredUpdate, TitleUpdate,
    ViewStateResponse,
)
from session_list.services.refresh_events import SessionsRefreshRequested
from session_list.services.runtime import SessionListRuntime
from session_list.services.session_list_controller import SessionListController

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/session-list", tags=["session-list"])

# Prevent proxy/browser buffering of streamed events
_SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",
    "Connection": "keep-alive",
}


def get_runtime(request: Request) -> SessionListRuntime:
    runtime = getattr(request.app.state, "session_list", None)
    if runtime is None or not runtime.scope.is_active:
        raise StoreUnavailableError("Session list is not running")
    return runtime


def get_controller(
    runtime: SessionListRuntime = Depends(get_runtime),
) -> SessionListController:
    return runtime.controller


def _snapshot(controller: SessionListController) -> ViewStateResponse:
    return ViewStateResponse.from_view_state(controller.snapshot())


def _offer_latest(queue: asyncio.Queue, state: ViewState) -> None:
    """Keep only the newest snapshot; an unread older one is replaced."""
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(state)


# --- View-state ---------------------------------------------------------------

@router.get("", response_model=ViewStateResponse)
async def get_view_state(
    controller: SessionListController = Depends(get_controller),
):
    """Current view-state snapshot."""
    return _snapshot(controller)


@router.get("/stream")
async def stream_view_state(
    controller: SessionListController = Depends(get_controller),
):
    """SSE stream of view-state snapshots."""
    queue: asyncio.Queue[ViewState] = asyncio.Queue(maxsize=1)

    def _on_change(field: ViewField, state: ViewState) -> None:
        _offer_latest(queue, state)

    remove = controller.subscribe(_on_change)

    async def event_generator():
        try:
            yield _sse_line(controller.snapshot())
            while True:
                yield _sse_line(await queue.get())
        except asyncio.CancelledError:
            logger.info("Client disconnected from session list stream")
            return
        finally:
            remove()

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers=_SSE_HEADERS,
    )


# --- Navigation ---------------------------------------------------------------

@router.post("/refresh", status_code=status.HTTP_202_ACCEPTED, response_model=ViewStateResponse)
async def refresh(controller: SessionListController = Depends(get_controller)):
    controller.refresh()
    return _snapshot(controller)


@router.post("/next-page", status_code=status.HTTP_202_ACCEPTED, response_model=ViewStateResponse)
async def next_page(controller: SessionListController = Depends(get_controller)):
    controller.next_page()
    return _snapshot(controller)


@router.post("/previous-page", status_code=status.HTTP_202_ACCEPTED, response_model=ViewStateResponse)
async def previous_page(controller: SessionListController = Depends(get_controller)):
    controller.previous_page()
    return _snapshot(controller)


@router.post("/page/{page}", status_code=status.HTTP_202_ACCEPTED, response_model=ViewStateResponse)
async def load_page(
    page: int = Path(ge=1),
    controller: SessionListController = Depends(get_controller),
):
    controller.load_sessions(page)
    return _snapshot(controller)


@router.post("/clear-error", response_model=ViewStateResponse)
async def clear_error(controller: SessionListController = Depends(get_controller)):
    controller.clear_error()
    return _snapshot(controller)


# --- Sessions -----------------------------------------------------------------

@router.post(
    "/sessions", response_model=SessionSummaryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(
    body: SessionCreate, runtime: SessionListRuntime = Depends(get_runtime),
):
    """Create a session and ask every list view to re-sync."""
    summary = await runtime.store.create_session(body.title, project_id=body.project_id)
    runtime.events.publish(SessionsRefreshRequested(reason="session created"))
    return SessionSummaryResponse.model_validate(summary)


@router.get("/sessions/starred", response_model=list[SessionSummaryResponse])
async def list_starred_sessions(runtime: SessionListRuntime = Depends(get_runtime)):
    starred = await runtime.store.get_starred_sessions()
    return [SessionSummaryResponse.model_validate(s) for s in starred]


@router.get("/sessions/{session_id}", response_model=SessionSummaryResponse)
async def get_session(
    session_id: str, runtime: SessionListRuntime = Depends(get_runtime),
):
    summary = await runtime.store.get_session(session_id)
    if summary is None:
        raise ResourceNotFoundError("Session", session_id)
    return SessionSummaryResponse.model_validate(summary)


@router.delete("/sessions/{session_id}", status_code=status.HTTP_202_ACCEPTED)
async def delete_session(
    session_id: str, controller: SessionListController = Depends(get_controller),
):
    """Accept deletion; outcome shows up as a refresh or an error_message."""
    controller.delete_session(session_id)
    return {"accepted": True, "session_id": session_id}


@router.put("/sessions/{session_id}/starred", status_code=status.HTTP_202_ACCEPTED)
async def update_starred(
    session_id: str, body: StarredUpdate,
    controller: SessionListController = Depends(get_controller),
):
    controller.update_session_starred(session_id, body.is_starred)
    return {"accepted": True, "session_id": session_id}


@router.put("/sessions/{session_id}/title", status_code=status.HTTP_202_ACCEPTED)
async def rename_session(
    session_id: str, body: TitleUpdate,
    controller: SessionListController = Depends(get_controller),
):
    controller.rename_session(session_id, body.title)
    return {"accepted": True, "session_id": session_id}


def _sse_line(state: ViewState) -> str:
    """Format a snapshot as an SSE data line."""
    payload = ViewStateResponse.from_view_state(state).model_dump(mode="json")
    return f"data: {json.dumps(payload, ensure_ascii=False)}\n\n"
