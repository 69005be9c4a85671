"""API test fixtures — app wired to an in-memory runtime.

Invariants:
    - Every test gets a fresh runtime with 25 sessions (s24 newest)
    - The lifespan is not run: the runtime is placed on app.state directly,
      so no database is touched

Design Decisions:
    - httpx ASGITransport over TestClient: async all the way, same loop as the controller
"""

import pytest
from httpx import ASGITransport, AsyncClient

from session_list.config import Settings
from session_list.main import app
from session_list.services.memory_store import InMemorySessionStore
from session_list.services.runtime import build_runtime
from tests.services.fake_stores import make_sessions


@pytest.fixture
async def runtime():
    runtime = build_runtime(Settings(), InMemorySessionStore(make_sessions(25)))
    await runtime.scope.join()
    yield runtime
    await runtime.close()


@pytest.fixture
async def client(runtime):
    app.state.session_list = runtime
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.state.session_list = None
