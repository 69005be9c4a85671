"""Database Session Manager — async engine, session scope, and driver-error mapping.

Invariants:
    - A failing session scope is rolled back before the error leaves it
    - SQLAlchemy exceptions never escape: each becomes a DatabaseError
      (core/errors.py) whose message names the failure kind, not the SQL
    - Pool sizing applies only to server databases; SQLite keeps the dialect default pool
    - Extra keyword arguments go to create_async_engine and override the defaults
      (e.g. poolclass=StaticPool for a shared in-memory SQLite)

Design Decisions:
    - One manager per runtime (services/runtime.py), disposed when the runtime closes
    - expire_on_commit=False: rows stay readable after commit, stores convert them
      to SessionSummary before the scope ends anyway
    - Most specific SQLAlchemy exception class wins (_ERROR_KINDS is ordered)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from session_list import models  # noqa: F401  registers tables on Base.metadata
from session_list.core.errors import DatabaseError
from session_list.db.base import Base

logger = logging.getLogger(__name__)

# (exception class, user-safe message, operation) — first match wins
_ERROR_KINDS: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "integrity constraint violated", "commit"),
    (OperationalError, "connection or operational error", "execute"),
    (DBAPIError, "driver error", "query"),
)


def _engine_kwargs(database_url: str, pool_size: int, max_overflow: int) -> dict:
    if database_url.startswith("sqlite"):
        return {}
    return {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


def _to_database_error(exc: SQLAlchemyError) -> DatabaseError:
    for kind, message, operation in _ERROR_KINDS:
        if isinstance(exc, kind):
            return DatabaseError(message, operation)
    return DatabaseError("operation failed", "unknown")


class DatabaseSessionManager:
    """Owns the engine for one database URL and hands out session scopes."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
        **engine_kwargs,
    ):
        options = _engine_kwargs(database_url, pool_size, max_overflow)
        options.update(engine_kwargs)
        self.engine = create_async_engine(database_url, **options)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Session scope; rolls back and raises DatabaseError on any SQLAlchemy failure."""
        async with self._session_factory() as db:
            try:
                yield db
            except SQLAlchemyError as e:
                await db.rollback()
                error = _to_database_error(e)
                logger.error(
                    f"{error.message} ({type(e).__name__}: {e})",
                    extra={"operation": error.operation},
                )
                raise error from e

    async def create_tables(self) -> None:
        """Create any missing tables (local SQLite runs without alembic)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()
