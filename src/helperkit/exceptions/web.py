"""
Web request exceptions.

Raised by the async web helpers. Cancellation is deliberately absent from
this module: ``asyncio.CancelledError`` always reaches the caller unwrapped.
"""

from typing import Optional

from .base import ExceptionContext, HelperKitError

# Keep error bodies readable in logs and tracebacks
_MAX_BODY_PREVIEW = 500


def _preview(body: str) -> Optional[str]:
    if not body:
        return None
    if len(body) <= _MAX_BODY_PREVIEW:
        return body
    return body[:_MAX_BODY_PREVIEW] + "..."


class WebRequestError(HelperKitError):
    """Base class for errors raised while executing a web request."""

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        url: Optional[str] = None,
        help_text: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[str] = None,
    ):
        self.method = method
        self.url = url
        context = ExceptionContext(
            help_text=help_text,
            error_code=error_code,
            context={"method": method, "url": url},
            details=details,
        )
        super().__init__(message, context)


class HttpStatusError(WebRequestError):
    """Raised when a response has a non-success status and failures are not allowed."""

    def __init__(
        self,
        status_code: int,
        body: str = "",
        method: Optional[str] = None,
        url: Optional[str] = None,
        reason_phrase: Optional[str] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.reason_phrase = reason_phrase

        message = f"Response status code does not indicate success: {status_code}"
        if reason_phrase:
            message += f" ({reason_phrase})"
        help_text = "Pass allow_failure=True to inspect non-success responses instead of raising"
        super().__init__(message, method, url, help_text, "HTTP_STATUS", _preview(body))
        self.context["status_code"] = status_code


class WebTransportError(WebRequestError):
    """Raised when the transport fails (connection, timeout, protocol errors)."""

    def __init__(self, details: str, method: Optional[str] = None, url: Optional[str] = None):
        super().__init__(
            f"Transport failure: {details}",
            method,
            url,
            "Check connectivity to the remote service and the transport timeout",
            "TRANSPORT_FAILED",
            details,
        )


class DeserializationError(WebRequestError):
    """Raised when a response body cannot be decoded into the requested type."""

    def __init__(
        self,
        details: str,
        result_type: Optional[str] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ):
        self.result_type = result_type
        message = "Failed to deserialize response body"
        if result_type:
            message += f" into {result_type}"
        message += f": {details}"
        super().__init__(message, method, url, None, "DESERIALIZATION_FAILED", details)
