"""Service test fixtures — task scope, in-memory store, controller, SQL database.

Invariants:
    - Every test gets a fresh TaskScope, closed (cancelled + drained) on teardown
    - The controller fixture has already settled its construction-time loads
    - Every SQL test gets a fresh in-memory SQLite database

Design Decisions:
    - SQLite in-memory via StaticPool: one shared connection, so the schema
      created in the fixture is visible to every session the store opens
    - Controller built inside an async fixture: construction launches tasks
      and needs the running loop
"""

import pytest
from sqlalchemy.pool import StaticPool

from session_list.core.error_translator import UserFriendlyErrorTranslator
from session_list.core.language_strings import LocalizedStrings
from session_list.infrastructure.database import DatabaseSessionManager
from session_list.services.memory_store import InMemorySessionStore
from session_list.services.session_list_controller import SessionListController
from session_list.services.task_scope import TaskScope
from tests.services.fake_stores import make_sessions


@pytest.fixture
async def scope():
    scope = TaskScope("test")
    yield scope
    await scope.aclose()


@pytest.fixture
def strings():
    return LocalizedStrings()


@pytest.fixture
def translator(strings):
    return UserFriendlyErrorTranslator(strings)


@pytest.fixture
def store():
    """25 sessions: s24 newest, s00 oldest."""
    return InMemorySessionStore(make_sessions(25))


@pytest.fixture
async def controller(scope, store, strings, translator):
    controller = SessionListController(scope, store, strings, translator)
    await scope.join()
    return controller


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await manager.create_tables()
    yield manager
    await manager.dispose()
