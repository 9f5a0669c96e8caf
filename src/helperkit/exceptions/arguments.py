"""
Argument validation exceptions.

Raised by public helpers when a caller passes an empty or missing value.
They also derive from the matching built-in exception so callers that only
know about ``ValueError``/``TypeError`` keep working.
"""

from typing import Optional

from .base import ExceptionContext, HelperKitError


class InvalidArgumentError(HelperKitError, ValueError):
    """Raised when an argument has an unusable value (for example an empty name)."""

    def __init__(self, argument: str, reason: str, error_code: str = "INVALID_ARGUMENT"):
        self.argument = argument
        self.reason = reason
        context = ExceptionContext(
            error_code=error_code,
            context={"argument": argument},
        )
        super().__init__(f"Invalid argument '{argument}': {reason}", context)


class NullArgumentError(InvalidArgumentError, TypeError):
    """Raised when a required argument is ``None``."""

    def __init__(self, argument: str, reason: Optional[str] = None):
        super().__init__(argument, reason or "value cannot be None", "NULL_ARGUMENT")
