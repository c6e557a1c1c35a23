"""Structured Logging - JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - timestamp is the record's creation time (UTC), not the format time
    - error_code and status_code surfaced top-level when present; method and
      path grouped under "request"
    - JSON format in production, human-readable ("text") in development
    - setup_logging is idempotent: calling it again replaces its own handler
"""

import logging
import json
from datetime import datetime, timezone

RESULT_FIELDS = ("error_code", "status_code")
REQUEST_FIELDS = ("method", "path")

_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(_present_fields(record, RESULT_FIELDS))
        request = _present_fields(record, REQUEST_FIELDS)
        if request:
            log["request"] = request
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            log["stack"] = self.formatStack(record.stack_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def _present_fields(record: logging.LogRecord, keys: tuple[str, ...]) -> dict:
    return {
        key: getattr(record, key)
        for key in keys
        if getattr(record, key, None) is not None
    }


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the application."""
    global _handler
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    if _handler is not None:
        logging.root.removeHandler(_handler)
    _handler = handler
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
