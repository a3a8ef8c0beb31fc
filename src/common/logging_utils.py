"""Centralized logging setup and structured-debug helpers."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict

# Support being imported as either "src.common.logging_utils" or "common.logging_utils"
try:
    from ..constants import Constants
except ImportError:
    from constants import Constants

_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, including any ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging() -> None:
    """Configure the root logger from DOCROUTER_LOG_LEVEL / DOCROUTER_LOG_FORMAT.

    Safe to call more than once; the handler installed by a previous call is replaced.
    """
    level_name = os.environ.get(Constants.ENV_LOG_LEVEL, Constants.DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.WARNING)

    handler = logging.StreamHandler()
    handler.set_name("docrouter")
    if os.environ.get(Constants.ENV_LOG_FORMAT, "").lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == "docrouter":
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Cheap guard before building structured debug payloads."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra=`` mapping, dropping empty values."""
    return {key: value for key, value in fields.items() if value is not None}
