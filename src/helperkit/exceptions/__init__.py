"""
helperkit Exception Hierarchy

Exception Hierarchy:
    HelperKitError (base)
    ├── ConfigurationError
    │   ├── InvalidConfigurationError
    │   ├── MissingConfigurationError
    │   └── ConfigurationValidationError
    ├── InvalidArgumentError
    │   └── NullArgumentError
    ├── WebRequestError
    │   ├── HttpStatusError
    │   ├── WebTransportError
    │   └── DeserializationError
    └── InteropError
        ├── ComObjectNotFoundError
        └── InteropUnavailableError

Cancellation is not part of the hierarchy: ``asyncio.CancelledError``
propagates unchanged so callers can tell "cancelled" from "failed".
"""

from .arguments import InvalidArgumentError, NullArgumentError
from .base import ExceptionContext, HelperKitError
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from .interop import ComObjectNotFoundError, InteropError, InteropUnavailableError
from .web import (
    DeserializationError,
    HttpStatusError,
    WebRequestError,
    WebTransportError,
)

__all__ = [
    # Base
    "HelperKitError",
    "ExceptionContext",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "ConfigurationValidationError",
    # Arguments
    "InvalidArgumentError",
    "NullArgumentError",
    # Web
    "WebRequestError",
    "HttpStatusError",
    "WebTransportError",
    "DeserializationError",
    # Interop
    "InteropError",
    "ComObjectNotFoundError",
    "InteropUnavailableError",
]
