"""Logging setup: one stdout handler on the ``idack`` logger, text or JSON lines."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

from idack.core.config import AppSettings

ROOT_LOGGER = "idack"

_RESERVED = {
    "name", "msg", "args", "created", "filename", "funcName", "levelname",
    "levelno", "lineno", "module", "msecs", "message", "pathname", "process",
    "processName", "relativeCreated", "thread", "threadName", "exc_info",
    "exc_text", "stack_info", "taskName",
}


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON object, including ``extra=`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(settings: AppSettings | None = None) -> logging.Logger:
    """Attach the stdout handler once and apply the configured level."""
    if settings is None:
        settings = AppSettings()

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(settings.log_level.upper())

    if not any(getattr(h, "_idack_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler._idack_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    else:
        handler = next(h for h in logger.handlers if getattr(h, "_idack_handler", False))

    if settings.log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
    return logger
