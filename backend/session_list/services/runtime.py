"""Session List Runtime — wires store, strings, translator, scope, and controller.

Invariants:
    - One runtime per process lifespan; the controller is created inside a running loop
    - close() cancels the scope first (no state writes after), then disposes the engine

Design Decisions:
    - Dataclass bundle over module globals: tests build their own runtime with an
      in-memory store and hand it to the app via app.state
"""

import logging
from dataclasses import dataclass

from session_list.config import Settings
from session_list.core.error_translator import UserFriendlyErrorTranslator
from session_list.core.language_strings import LocalizedStrings
from session_list.core.repository_protocols import SessionCatalog
from session_list.infrastructure.database import DatabaseSessionManager
from session_list.services.refresh_events import RefreshEventBus
from session_list.services.session_list_controller import SessionListController
from session_list.services.session_store import SqlSessionStore
from session_list.services.task_scope import TaskScope

logger = logging.getLogger(__name__)


@dataclass
class SessionListRuntime:
    scope: TaskScope
    store: SessionCatalog
    controller: SessionListController
    events: RefreshEventBus
    db: DatabaseSessionManager | None = None

    async def close(self) -> None:
        await self.scope.aclose()
        if self.db is not None:
            await self.db.dispose()


def build_runtime(
    settings: Settings,
    store: SessionCatalog,
    db: DatabaseSessionManager | None = None,
) -> SessionListRuntime:
    """Create the controller for `store` and subscribe it to refresh events."""
    strings = LocalizedStrings(settings.locale)
    scope = TaskScope("session-list")
    events = RefreshEventBus()
    controller = SessionListController(
        scope,
        store,
        strings,
        UserFriendlyErrorTranslator(strings),
        sessions_per_page=settings.sessions_per_page,
        max_sidebar_sessions=settings.max_sidebar_sessions,
    )
    controller.listen_for_refresh(events)
    logger.info(
        f"Session list ready (page size {settings.sessions_per_page}, "
        f"locale {settings.locale.value})",
    )
    return SessionListRuntime(
        scope=scope, store=store, controller=controller, events=events, db=db,
    )


async def build_sql_runtime(settings: Settings) -> SessionListRuntime:
    """Production wiring: SQL store on the configured database."""
    db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await db.create_tables()
    store = SqlSessionStore(db, timeout_s=settings.store_timeout_seconds)
    return build_runtime(settings, store, db)
