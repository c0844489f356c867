"""Observability — resource-aware log records and handler setup.

Invariants:
    - Every record carries timestamp, level, logger and message
    - Resource context (type, id, field, error code, request path) appears only when set
    - error_log_extra is the single place a domain error becomes log context

Design Decisions:
    - Error context comes from the raised error, not the call site, so adapter
      failures and HTTP handlers log the same keys for the same problem
    - Non-JSON values (enum members, ids of odd types) are stringified instead of failing the log call
"""

import logging
import json
from datetime import datetime, timezone
from typing import Any

from jsonapi_resource.core.errors import JsonApiResourceError

EXTRA_FIELDS = (
    "resource_type", "resource_id", "error_code", "field", "path",
)


def error_log_extra(error: JsonApiResourceError, **extra: Any) -> dict[str, Any]:
    """Log `extra=` mapping for a domain error; keyword arguments win over the error's context."""
    context = {
        "error_code": error.code,
        "resource_type": error.context.resource_type,
        "resource_id": error.context.resource_id,
        "field": error.context.field,
    }
    context.update(extra)
    return context


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with resource context lifted from `extra=`."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install a root handler; the caller removes it on shutdown."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(resource_type)s]: %(message)s",
            defaults={"resource_type": "-"},
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
