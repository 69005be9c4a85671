"""Structured Logging — JSON and text formatters that carry session-list context.

Invariants:
    - Every record renders timestamp, level, logger and message
    - Context attributes passed via extra= (session_id, operation, page, ...) are
      rendered when set and omitted when None, in both formats
    - setup_logging() owns exactly one root handler, replaced on each call

Design Decisions:
    - stdlib logging only: modules log through logging.getLogger(__name__) and
      never import this module
    - Timestamp taken from record.created, so queued/delayed handlers keep the
      time the event happened
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = ("session_id", "operation", "page", "error_code", "path")

_HANDLER_NAME = "session_list"


def _context_of(record: logging.LogRecord) -> dict:
    return {
        name: getattr(record, name)
        for name in CONTEXT_FIELDS
        if getattr(record, name, None) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context_of(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class ContextTextFormatter(logging.Formatter):
    """Human-readable line with context appended as key=value pairs."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context_of(record)
        if context:
            pairs = " ".join(f"{k}={v}" for k, v in context.items())
            line = f"{line} [{pairs}]"
        return line


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the application handler on the root logger (JSON or text)."""
    root = logging.getLogger()
    for handler in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else ContextTextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
