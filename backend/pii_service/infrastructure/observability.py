"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (route_key, status_code, error_code, request_id, method) surfaced when present
    - Request paths of unmatched routes and request bodies are never passed to a logger
    - setup_logging is idempotent: warm function invocations reuse the same handler
    - Exactly one handler emits each record, even under a runtime that pre-installs one

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once per process (FastAPI lifespan or function cold start)
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = ("route_key", "method", "status_code", "error_code", "request_id")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _ServiceHandler(logging.StreamHandler):
    """Marker type so repeated setup_logging calls replace rather than stack."""


def setup_logging(
    level: str = "INFO", fmt: str = "json", replace_handlers: bool = False,
):
    """Configure logging for the application.

    replace_handlers drops every root handler first (hosts such as the Lambda
    runtime install their own, which would emit each record twice).
    """
    for existing in list(logging.root.handlers):
        if replace_handlers or isinstance(existing, _ServiceHandler):
            logging.root.removeHandler(existing)
    handler = _ServiceHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
