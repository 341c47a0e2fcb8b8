"""Structured logging for table definition generation.

Records are rendered as one JSON object per line. Trace and span ids are
taken from the active OpenTelemetry span so the diagnostics of one import
can be joined with the caller's traces.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet, Optional

from opentelemetry import trace

PACKAGE_LOGGER = "tabledef"

# Attributes every LogRecord carries; anything else arrived through ``extra``
# or a filter.
_STANDARD_ATTRS: FrozenSet[str] = frozenset(vars(logging.makeLogRecord({}))) | {"asctime", "message"}


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class TableDefJsonFormatter(logging.Formatter):
    """Render a record as JSON, carrying extras and the current trace ids."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, value) for key, value in vars(record).items() if key not in _STANDARD_ATTRS
        )

        ctx = trace.get_current_span().get_span_context()
        if ctx.is_valid:
            entry["trace_id"] = trace.format_trace_id(ctx.trace_id)
            entry["span_id"] = trace.format_span_id(ctx.span_id)

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(level: Optional[str] = None) -> None:
    """Install the JSON handler on the ``tabledef`` logger.

    The root logger is left alone so embedding applications keep their own
    configuration.

    Args:
        level: Log level name. Defaults to ``TableDefSettings.log_level``.
    """
    if level is None:
        # Lazy import to avoid circular dependency
        from tabledef.settings import get_settings
        level = get_settings().log_level
    level = level.upper()

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "tabledef_json": {"()": f"{__name__}.TableDefJsonFormatter"},
        },
        "filters": {
            "tabledef_context": {"()": "tabledef.logging.filters.ContextFilter"},
        },
        "handlers": {
            "tabledef_stderr": {
                "class": "logging.StreamHandler",
                "formatter": "tabledef_json",
                "filters": ["tabledef_context"],
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            PACKAGE_LOGGER: {
                "level": level,
                "handlers": ["tabledef_stderr"],
                "propagate": False,
            },
        },
    })
