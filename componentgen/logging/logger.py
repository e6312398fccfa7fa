"""
JSON logging for the ``componentgen`` logger tree.

Only the package's own logger is configured, so a host application's root
handlers are left alone. Dispatch records carry ``provider``, ``model`` and
``chars`` in ``_extra``; the formatter lifts those to top-level keys so log
pipelines can filter on them without parsing the message.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

PACKAGE_LOGGER = "componentgen"

_PROMOTED_FIELDS = ("provider", "model", "chars", "endpoint")


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects."""

    def __init__(self, app_name: str) -> None:
        super().__init__()
        self._app = app_name

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "app": self._app,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = dict(getattr(record, "_extra", None) or {})
        for field in _PROMOTED_FIELDS:
            if field in extra:
                entry[field] = extra.pop(field)
        if extra:
            entry["extra"] = extra

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(level: str = "INFO", app_name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Send ``componentgen`` records to stdout as JSON at ``level``.

    Safe to call more than once: a previously installed JSON handler is
    replaced rather than duplicated. Unknown level names fall back to INFO.
    """
    level_name = (level.strip() or "INFO").upper()
    resolved = getattr(logging, level_name, None)
    if not isinstance(resolved, int):
        level_name, resolved = "INFO", logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter(app_name))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if isinstance(existing.formatter, JSONFormatter):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False

    # Client libraries log every request at INFO
    for noisy in ("httpx", "httpcore", "openai"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logger.debug("Logging initialized", extra={"_extra": {"level": level_name}})
    return logger
