# src/utils/observability.py
"""
Logging setup.

Diagnostics go to stderr; stdout is reserved for the premium report line.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

HANDLER_NAME = "quote-engine"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def _formatter(fmt: str) -> logging.Formatter:
    if fmt == "json":
        return JSONFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")


def setup_logging(level: str = "WARNING", fmt: str = "text") -> None:
    """
    Configure root logging. Repeat calls reuse the existing handler and
    update its level and format instead of adding another one.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for h in root.handlers:
        if h.get_name() == HANDLER_NAME:
            h.setFormatter(_formatter(fmt))
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(_formatter(fmt))
    root.addHandler(handler)
