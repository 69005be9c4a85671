"""In-Memory Session Store — ordering, paging, mutations, injected failures."""

from dataclasses import replace
from datetime import timedelta

import pytest

from session_list.core.errors import SessionValidationError
from session_list.services.memory_store import InMemorySessionStore
from tests.services.fake_stores import BASE_TIME, make_sessions


@pytest.fixture
def memory_store():
    return InMemorySessionStore(make_sessions(12))


async def test_sorted_newest_first(memory_store):
    sessions = await memory_store.get_all_sessions_sorted()
    assert [s.id for s in sessions[:3]] == ["s11", "s10", "s09"]


async def test_equal_timestamps_tie_break_on_id():
    sessions = [
        replace(s, created_at=BASE_TIME)
        for s in make_sessions(3, ids=["b", "c", "a"])
    ]
    store = InMemorySessionStore(sessions)
    assert [s.id for s in await store.get_all_sessions_sorted()] == ["c", "b", "a"]


async def test_paging(memory_store):
    page = await memory_store.get_sessions_paged(2, 10)
    assert page.current_page == 2
    assert page.session_ids == ["s01", "s00"]
    assert page.total_sessions == 12


async def test_invalid_page_size(memory_store):
    with pytest.raises(SessionValidationError):
        await memory_store.get_sessions_paged(1, 0)


async def test_delete(memory_store):
    assert await memory_store.delete_session("s03") is True
    assert await memory_store.delete_session("s03") is False
    assert await memory_store.get_session("s03") is None


async def test_star_bumps_updated_at(memory_store):
    before = await memory_store.get_session("s05")
    assert await memory_store.update_session_starred("s05", True) is True
    after = await memory_store.get_session("s05")
    assert after.is_starred is True
    assert after.updated_at > before.updated_at
    assert after.created_at == before.created_at
    starred = await memory_store.get_starred_sessions()
    assert [s.id for s in starred] == ["s05"]


async def test_star_missing(memory_store):
    assert await memory_store.update_session_starred("nope", True) is False


async def test_rename_trims_and_caps(memory_store):
    assert await memory_store.rename_title("s01", "  " + "t" * 300) is True
    renamed = await memory_store.get_session("s01")
    assert renamed.title == "t" * 256


async def test_rename_blank_not_applied(memory_store):
    assert await memory_store.rename_title("s01", "   ") is False
    assert (await memory_store.get_session("s01")).title == "Session 1"


async def test_create_session_is_newest(memory_store):
    created = await memory_store.create_session("  Brand new ", project_id="p1")
    assert created.title == "Brand new"
    assert created.project_id == "p1"
    newest = (await memory_store.get_all_sessions_sorted())[0]
    assert newest.id == created.id


async def test_create_with_explicit_id_and_time(memory_store):
    created = await memory_store.create_session(
        "Old one", session_id="legacy", created_at=BASE_TIME - timedelta(days=1),
    )
    oldest = (await memory_store.get_all_sessions_sorted())[-1]
    assert oldest.id == created.id == "legacy"


async def test_create_blank_title_rejected(memory_store):
    with pytest.raises(SessionValidationError):
        await memory_store.create_session("  ")


async def test_fail_with_injects_error(memory_store):
    memory_store.fail_with["delete_session"] = ConnectionError("offline")
    with pytest.raises(ConnectionError):
        await memory_store.delete_session("s01")
    assert memory_store.calls == ["delete_session"]
