"""
Request and response types for the async web helpers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..constants import JSON_ENCODING
from ..exceptions import InvalidArgumentError, NullArgumentError


class HttpMethod(str, Enum):
    """HTTP methods supported by the web helpers."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, method: Union[str, "HttpMethod"]) -> "HttpMethod":
        """Parse a method name case-insensitively."""
        if method is None:
            raise NullArgumentError("method")
        if isinstance(method, cls):
            return method
        try:
            return cls(str(method).upper())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise InvalidArgumentError("method", f"'{method}' is not one of {allowed}") from None


@dataclass
class WebResponse:
    """Outcome of a single request.

    ``result`` holds the deserialized body, or ``None`` when the body was
    empty or deserialization was skipped.
    """

    status_code: int
    success: bool
    body: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)
    result: Optional[Any] = None

    @property
    def text(self) -> str:
        return self.body.decode(JSON_ENCODING, errors="replace")
