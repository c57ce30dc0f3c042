"""Shared logging utilities for the converter."""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

from ..domain.configuration import LoggingSettings

LOGGER_NAME = "encoding_converter"
ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

_RESERVED = {
    "msg", "args", "levelname", "levelno", "name", "pathname", "filename", "module",
    "exc_info", "exc_text", "stack_info", "lineno", "funcName", "created", "msecs",
    "relativeCreated", "thread", "threadName", "processName", "process", "taskName",
}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, merged with any ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": datetime.now(timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RESERVED:
                continue
            if key not in base:
                base[key] = value
        return json.dumps(base, ensure_ascii=False, default=str)


def configure_logger(settings: LoggingSettings) -> logging.Logger:
    """Configure the package logger with plain or JSON output."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.level)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    if settings.json_mode:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger
