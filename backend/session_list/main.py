"""Session List API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SessionListError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Runtime (DB + controller) built on startup and torn down on shutdown via lifespan
    - A runtime already on app.state (tests) is used as-is and not closed here

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Controller bound to the lifespan's event loop: every view-state write happens
      on the loop thread that serves requests
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from session_list.api.error_handlers import register_error_handlers
from session_list.api.routes import health, session_list
from session_list.api.routes.health import SERVICE_VERSION
from session_list.config import get_settings
from session_list.infrastructure.observability import setup_logging
from session_list.services.runtime import build_sql_runtime

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    owned = getattr(app.state, "session_list", None) is None
    if owned:
        app.state.session_list = await build_sql_runtime(settings)
    logger.info("Session List API started")
    yield
    logger.info("Session List API shutting down")
    if owned:
        await app.state.session_list.close()
        app.state.session_list = None


app = FastAPI(
    title="Session List API", version=SERVICE_VERSION, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(session_list.router)

register_error_handlers(app)
