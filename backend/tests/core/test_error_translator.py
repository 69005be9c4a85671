"""Error Translator tests — failure → user-facing message mapping.

Tests cover:
    - classify_error for typed and builtin exceptions
    - Category templates receive the operation context label
    - Uncategorized errors return the caller's fallback unchanged
    - Broken templates degrade to the fallback instead of raising
"""

import asyncio

from session_list.core.errors import (
    DatabaseError, ErrorCategory, ResourceNotFoundError,
    SessionValidationError, StoreTimeoutError, StoreUnavailableError,
)
from session_list.core.error_translator import (
    UserFriendlyErrorTranslator, classify_error,
)
from session_list.core.language_strings import Locale, LocalizedStrings

_FALLBACK = "Failed to load sessions."


class _DictStrings:
    def __init__(self, table: dict[str, str]):
        self._table = table

    def get_string(self, key: str) -> str:
        return self._table.get(key, key)


# --- classify_error -----------------------------------------------------------


def test_typed_errors_use_their_category():
    assert classify_error(DatabaseError("x", "query")) is ErrorCategory.DATABASE
    assert classify_error(StoreTimeoutError("op", 1.0)) is ErrorCategory.TIMEOUT
    assert classify_error(StoreUnavailableError("down")) is ErrorCategory.CONNECTION
    assert classify_error(ResourceNotFoundError("Session", "s1")) is ErrorCategory.RESOURCE_NOT_FOUND
    assert classify_error(SessionValidationError("bad", "title")) is ErrorCategory.VALIDATION


def test_builtin_timeout_before_oserror():
    assert classify_error(TimeoutError()) is ErrorCategory.TIMEOUT
    assert classify_error(asyncio.TimeoutError()) is ErrorCategory.TIMEOUT


def test_builtin_connection_errors():
    assert classify_error(ConnectionRefusedError()) is ErrorCategory.CONNECTION
    assert classify_error(OSError("disk")) is ErrorCategory.CONNECTION


def test_key_error_is_not_found():
    assert classify_error(KeyError("s1")) is ErrorCategory.RESOURCE_NOT_FOUND


def test_everything_else_is_internal():
    assert classify_error(RuntimeError("boom")) is ErrorCategory.INTERNAL
    assert classify_error(ValueError("bad")) is ErrorCategory.INTERNAL


# --- get_user_friendly_error --------------------------------------------------


def test_database_error_mentions_context():
    translator = UserFriendlyErrorTranslator(LocalizedStrings())
    message = translator.get_user_friendly_error(
        DatabaseError("locked", "query"), "loading sessions", _FALLBACK,
    )
    assert message == (
        "The session database is unavailable while loading sessions. Please try again."
    )


def test_internal_error_returns_fallback():
    translator = UserFriendlyErrorTranslator(LocalizedStrings())
    message = translator.get_user_friendly_error(
        RuntimeError("secret stack detail"), "loading sessions", _FALLBACK,
    )
    assert message == _FALLBACK


def test_raw_exception_text_never_leaks():
    translator = UserFriendlyErrorTranslator(LocalizedStrings(Locale.FR))
    message = translator.get_user_friendly_error(
        DatabaseError("password=hunter2", "query"), "deleting session", "fallback",
    )
    assert "hunter2" not in message
    assert "deleting session" in message


def test_broken_template_falls_back():
    translator = UserFriendlyErrorTranslator(
        _DictStrings({"error.timeout": "Timed out: {missing}"}),
    )
    message = translator.get_user_friendly_error(
        TimeoutError(), "renaming session", "Failed to rename session.",
    )
    assert message == "Failed to rename session."


def test_empty_template_falls_back():
    translator = UserFriendlyErrorTranslator(_DictStrings({"error.connection": ""}))
    message = translator.get_user_friendly_error(
        ConnectionError(), "updating session", "Failed to update session.",
    )
    assert message == "Failed to update session."
