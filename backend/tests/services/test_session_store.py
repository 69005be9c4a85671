"""SQL Session Store — SessionStore over an in-memory SQLite database.

Invariants:
    - Same ordering and paging results as the in-memory store
    - Mutations report whether a row matched
    - Slow calls raise StoreTimeoutError when a timeout is configured
"""

import asyncio
from datetime import timedelta

import pytest

from session_list.core.errors import DatabaseError, SessionValidationError, StoreTimeoutError
from session_list.services.session_store import SqlSessionStore
from tests.services.fake_stores import BASE_TIME


@pytest.fixture
async def sql_store(db_manager):
    store = SqlSessionStore(db_manager)
    for i in range(25):
        await store.create_session(
            f"Session {i}", session_id=f"s{i:02d}",
            created_at=BASE_TIME + timedelta(minutes=i),
        )
    return store


async def test_empty_table_is_page_one_of_zero(db_manager):
    page = await SqlSessionStore(db_manager).get_sessions_paged(3, 10)
    assert page.current_page == 1
    assert page.total_pages == 0
    assert page.is_empty


async def test_first_page(sql_store):
    page = await sql_store.get_sessions_paged(1, 10)
    assert page.total_sessions == 25
    assert page.total_pages == 3
    assert page.session_ids[:2] == ["s24", "s23"]
    assert page.has_next_page and not page.has_previous_page


async def test_last_page_clamped(sql_store):
    page = await sql_store.get_sessions_paged(42, 10)
    assert page.current_page == 3
    assert page.session_ids == ["s04", "s03", "s02", "s01", "s00"]


async def test_invalid_page_size(sql_store):
    with pytest.raises(SessionValidationError):
        await sql_store.get_sessions_paged(1, 0)


async def test_sorted_list(sql_store):
    sessions = await sql_store.get_all_sessions_sorted()
    assert len(sessions) == 25
    assert sessions[0].id == "s24"
    assert sessions[-1].id == "s00"


async def test_delete(sql_store):
    assert await sql_store.delete_session("s10") is True
    assert await sql_store.delete_session("s10") is False
    assert await sql_store.get_session("s10") is None
    assert (await sql_store.get_sessions_paged(1, 10)).total_sessions == 24


async def test_star_and_starred_list(sql_store):
    assert await sql_store.update_session_starred("s07", True) is True
    assert await sql_store.update_session_starred("missing", True) is False
    starred = await sql_store.get_starred_sessions()
    assert [s.id for s in starred] == ["s07"]
    assert starred[0].is_starred is True


async def test_rename(sql_store):
    assert await sql_store.rename_title("s03", "  Renamed  ") is True
    assert (await sql_store.get_session("s03")).title == "Renamed"


async def test_rename_blank_or_missing(sql_store):
    assert await sql_store.rename_title("s03", "  ") is False
    assert await sql_store.rename_title("missing", "Title") is False
    assert (await sql_store.get_session("s03")).title == "Session 3"


async def test_create_generates_id(sql_store):
    created = await sql_store.create_session("Generated")
    assert len(created.id) == 36
    assert (await sql_store.get_all_sessions_sorted())[0].id == created.id


async def test_duplicate_id_raises_database_error(sql_store):
    with pytest.raises(DatabaseError):
        await sql_store.create_session("Dup", session_id="s01")


async def test_timeout_raises_store_timeout(db_manager, monkeypatch):
    store = SqlSessionStore(db_manager, timeout_s=0.01)

    async def slow_page(page, page_size):
        await asyncio.sleep(1)

    monkeypatch.setattr(store, "_fetch_page", slow_page)
    with pytest.raises(StoreTimeoutError) as exc:
        await store.get_sessions_paged(1, 10)
    assert exc.value.operation == "get_sessions_paged"


async def test_lookup_and_create_are_bounded(db_manager, monkeypatch):
    store = SqlSessionStore(db_manager, timeout_s=0.01)

    async def stall(*args):
        await asyncio.sleep(1)

    monkeypatch.setattr(store, "_fetch_one", stall)
    monkeypatch.setattr(store, "_insert", stall)
    with pytest.raises(StoreTimeoutError) as exc:
        await store.get_session("s01")
    assert exc.value.operation == "get_session"
    with pytest.raises(StoreTimeoutError) as exc:
        await store.create_session("New")
    assert exc.value.operation == "create_session"
