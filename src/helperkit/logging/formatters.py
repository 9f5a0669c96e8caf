"""
Log formatters for console, JSON and Rich output.

Keyword context passed to ``HelperKitLogger`` arrives on the record as
``extra_context``; every formatter here renders it.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from rich.console import Console
from rich.logging import RichHandler

from ..exceptions.base import HelperKitError

CONSOLE_FORMAT = "%(asctime)s [%(levelname)8s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _context_of(record: logging.LogRecord) -> Dict[str, Any]:
    return getattr(record, "extra_context", None) or {}


def _context_suffix(record: logging.LogRecord) -> str:
    context = _context_of(record)
    if not context:
        return ""
    return " | " + " ".join(f"{key}={value}" for key, value in context.items())


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def __init__(self, service_name: str = "helperkit", version: str = "unknown"):
        super().__init__()
        self.service_name = service_name
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.version,
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
            "thread_name": record.threadName,
        }

        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id:
            entry["correlation_id"] = correlation_id

        entry.update(_context_of(record))

        if record.exc_info and record.exc_info[0] is not None:
            error = record.exc_info[1]
            entry["error"] = {
                "type": record.exc_info[0].__name__,
                "message": str(error),
                "traceback": self.formatException(record.exc_info),
            }
            if isinstance(error, HelperKitError):
                entry["error"]["message"] = error.message
                entry["error"]["code"] = error.error_code
                entry["error"]["id"] = error.correlation_id

        return json.dumps(entry, default=str, ensure_ascii=False)


class ContextFormatter(logging.Formatter):
    """Human-readable lines with keyword context appended as ``key=value`` pairs."""

    def __init__(self, fmt: str = CONSOLE_FORMAT, datefmt: str = DATE_FORMAT):
        super().__init__(fmt, datefmt=datefmt)

    def formatMessage(self, record: logging.LogRecord) -> str:
        return super().formatMessage(record) + _context_suffix(record)


def create_rich_handler() -> logging.Handler:
    """Rich handler on stderr; context is appended to the message."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(ContextFormatter("%(message)s"))
    return handler
