"""
Logger wrapper with correlation IDs and structured context.
"""

import logging
from typing import Any, Dict, Optional
from uuid import uuid4


class HelperKitLogger:
    """Logger that attaches a correlation ID and keyword context to every record."""

    def __init__(self, name: str, correlation_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id or str(uuid4())
        self.extra_context: Dict[str, Any] = {}

    @property
    def name(self) -> str:
        return self.logger.name

    def _log(self, level: int, msg: str, exc_info: Any = None, **kwargs):
        """Internal logging method with correlation ID and context."""
        if not self.logger.isEnabledFor(level):
            return
        extra: Dict[str, Any] = {"correlation_id": self.correlation_id}
        context = dict(self.extra_context)
        context.update(kwargs)
        if context:
            extra["extra_context"] = context

        self.logger.log(level, msg, exc_info=exc_info, extra=extra, stacklevel=3)

    def debug(self, msg: str, **kwargs):
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        self._log(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs):
        """Log exception with traceback."""
        kwargs["exc_info"] = True
        self._log(logging.ERROR, msg, **kwargs)

    def add_context(self, **kwargs):
        """Add persistent context to this logger."""
        self.extra_context.update(kwargs)

    def clear_context(self):
        self.extra_context.clear()

    def with_context(self, **kwargs) -> "HelperKitLogger":
        """Create a copy of this logger with additional context."""
        new_logger = HelperKitLogger(self.logger.name, self.correlation_id)
        new_logger.extra_context = self.extra_context.copy()
        new_logger.extra_context.update(kwargs)
        return new_logger
