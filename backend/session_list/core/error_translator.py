"""Error Translator — maps any raised failure to a short user-facing message.

Invariants:
    - get_user_friendly_error() never raises and always returns a non-empty string
    - Typed SessionListError → message chosen by its ErrorCategory
    - Builtin timeout / connection failures map to the same categories
    - Anything uncategorized → the caller's fallback (already localized)
    - Raw exception text never reaches the user

Design Decisions:
    - Category templates live in language_strings (error.<category>), context label
      substituted in; keeps the controller free of per-error branching
    - INTERNAL has no template: the operation-specific fallback is shown instead
      of a generic "something went wrong"
"""

from session_list.core.errors import ErrorCategory, SessionListError
from session_list.core.repository_protocols import StringLookup

_CATEGORY_KEYS: dict[ErrorCategory, str] = {
    ErrorCategory.DATABASE: "error.database",
    ErrorCategory.TIMEOUT: "error.timeout",
    ErrorCategory.CONNECTION: "error.connection",
    ErrorCategory.RESOURCE_NOT_FOUND: "error.not.found",
    ErrorCategory.VALIDATION: "error.validation",
}


def classify_error(error: BaseException) -> ErrorCategory:
    """Best-effort category for any exception."""
    if isinstance(error, SessionListError):
        return error.category
    # TimeoutError first: it is an OSError subclass
    if isinstance(error, TimeoutError):
        return ErrorCategory.TIMEOUT
    if isinstance(error, (ConnectionError, OSError)):
        return ErrorCategory.CONNECTION
    if isinstance(error, KeyError):
        return ErrorCategory.RESOURCE_NOT_FOUND
    return ErrorCategory.INTERNAL


class UserFriendlyErrorTranslator:
    """Default ErrorTranslator backed by a StringLookup."""

    def __init__(self, strings: StringLookup):
        self._strings = strings

    def get_user_friendly_error(
        self, error: BaseException, context: str, fallback: str,
    ) -> str:
        key = _CATEGORY_KEYS.get(classify_error(error))
        if key is None:
            return fallback
        template = self._strings.get_string(key)
        try:
            message = template.format(context=context)
        except (KeyError, IndexError, ValueError):
            return fallback
        return message or fallback
