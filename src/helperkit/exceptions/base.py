"""
Base exception classes for helperkit.

Every error raised by the library derives from ``HelperKitError``, which
carries optional guidance, a machine-readable code, a context mapping and a
short correlation id that also appears in the structured logs.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


def _new_correlation_id() -> str:
    return uuid.uuid4().hex[:8]


@dataclass
class ExceptionContext:
    """Optional details attached to a ``HelperKitError``."""

    help_text: Optional[str] = None
    error_code: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)
    details: Optional[str] = None
    correlation_id: Optional[str] = None


class HelperKitError(Exception):
    """Base exception for all helperkit errors.

    Attributes:
        message: The error message
        help_text: Actionable guidance for the caller
        error_code: Code for programmatic handling
        context: Values describing where the error happened (method, url, ...)
        details: Raw diagnostic text such as a truncated response body
        correlation_id: Short id for matching the error to log records
    """

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        context = context or ExceptionContext()

        self.message = message
        self.help_text = context.help_text
        self.error_code = context.error_code
        self.context = dict(context.context)
        self.details = context.details
        self.correlation_id = context.correlation_id or _new_correlation_id()
        self.timestamp = datetime.now()
        super().__init__(message)

    def __str__(self) -> str:
        sections: List[str] = [self.message]

        if self.help_text:
            sections.append(f"💡 Help: {self.help_text}")

        context_items = [f"{k}: {v}" for k, v in self.context.items() if v is not None]
        if context_items:
            sections.append(f"📋 Context: {', '.join(context_items)}")

        sections.append(f"🔍 Error ID: {self.correlation_id}")
        return "\n\n".join(sections)

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view for logs and CLI output; unset fields are omitted."""
        data = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "help_text": self.help_text,
            "details": self.details,
            "correlation_id": self.correlation_id,
            "timestamp": self.timestamp.isoformat(),
            "context": {k: v for k, v in self.context.items() if v is not None},
        }
        return {k: v for k, v in data.items() if v is not None}

    def add_context(self, **kwargs) -> "HelperKitError":
        """Add context values and return the same exception for chaining."""
        self.context.update(kwargs)
        return self
