"""
Platform interop exceptions (COM activation and inspection).
"""

from typing import Optional

from .base import ExceptionContext, HelperKitError


class InteropError(HelperKitError):
    """Base class for platform interop errors."""


class ComObjectNotFoundError(InteropError):
    """Raised when no running instance is registered for a ProgID."""

    def __init__(self, prog_id: str, details: Optional[str] = None):
        self.prog_id = prog_id
        message = f"No running COM instance found for '{prog_id}'"
        if details:
            message += f": {details}"
        context = ExceptionContext(
            help_text=f"Start the application registered as '{prog_id}' and retry",
            error_code="COM_NOT_FOUND",
            context={"prog_id": prog_id},
        )
        super().__init__(message, context)


class InteropUnavailableError(InteropError):
    """Raised when COM support is not available on this platform."""

    def __init__(self, details: str):
        context = ExceptionContext(
            help_text="COM activation requires Windows with the 'comtypes' package installed",
            error_code="INTEROP_UNAVAILABLE",
        )
        super().__init__(f"COM interop unavailable: {details}", context)
