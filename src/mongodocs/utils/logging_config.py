"""Logging setup shared by the library, the CLI and the server.

Modules obtain loggers through :func:`get_logger`. Structured context is passed
with ``extra={...}`` and rendered by :class:`ExtraFieldsFormatter` either as
``key=value`` pairs or as one JSON object per line.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from mongodocs.config import MONGODOCS_LOG_FORMAT, MONGODOCS_LOG_LEVEL

# Attributes every LogRecord carries; anything else came from ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime", "taskName"}

_configured = False


class ExtraFieldsFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields to each record."""

    def __init__(self, *, json_output: bool = False) -> None:
        super().__init__()
        self.json_output = json_output

    def format(self, record: logging.LogRecord) -> str:
        extra = _extra_fields(record)
        if self.json_output:
            payload: dict[str, Any] = {
                "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
                **extra,
            }
            if record.exc_info:
                payload["exception"] = self.formatException(record.exc_info)
            return json.dumps(payload, default=str)

        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        line = f"{timestamp} | {record.levelname:<8} | {record.name} | {record.getMessage()}"
        if extra:
            line += " | " + " ".join(f"{key}={value!r}" for key, value in extra.items())
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS}


def configure_logging(level: str | None = None, fmt: str | None = None, *, force: bool = False) -> None:
    """Install a single stderr handler on the root logger.

    Uvicorn and FastAPI loggers propagate to the root logger, so the server
    runs uvicorn with ``log_config=None`` and everything ends up here.
    """
    global _configured
    if _configured and not force:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ExtraFieldsFormatter(json_output=(fmt or MONGODOCS_LOG_FORMAT) == "json"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing.formatter, ExtraFieldsFormatter):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level or MONGODOCS_LOG_LEVEL)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = []
        uvicorn_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring logging on first use."""
    configure_logging()
    return logging.getLogger(name)
