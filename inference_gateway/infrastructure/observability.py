"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Correlation fields (transaction_id, inference_request_id, job_id, ...) surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging is idempotent: repeated calls never stack handlers

Design Decisions:
    - Correlation ids travel via `extra=` on stdlib logging calls
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

CORRELATION_FIELDS: tuple[str, ...] = (
    "transaction_id", "inference_request_id", "job_id", "payload_id",
    "error_code", "try_count", "priority", "path",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in CORRELATION_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = str(val) if not isinstance(val, (int, float, bool)) else val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


_HANDLER_NAME = "inference_gateway"


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
