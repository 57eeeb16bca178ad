"""Structured Logging - JSON formatter and setup for the todo service.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (todo_id, error_code, path, method, status_code) surfaced when present
    - A record carrying a TodoAppError reports its error_code and todo_id even
      when the caller passed no extras; explicit extras win
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from datetime import datetime, timezone

from todoapp.core.errors import TodoAppError

_EXTRA_KEYS = ("todo_id", "error_code", "path", "method", "status_code")


def _error_fields(record: logging.LogRecord) -> dict:
    """error_code / todo_id taken from an attached TodoAppError."""
    exc = record.exc_info[1] if record.exc_info else None
    if not isinstance(exc, TodoAppError):
        return {}
    fields = {"error_code": exc.code}
    if exc.context.todo_id is not None:
        fields["todo_id"] = exc.context.todo_id
    return fields


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(_error_fields(record))
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the todo service."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [todo=%(todo_id)s] - %(message)s",
            defaults={"todo_id": "-"},
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
