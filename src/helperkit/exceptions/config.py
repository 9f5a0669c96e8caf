"""
Configuration-related exceptions.

Raised while loading, validating or resolving configuration, including the
cloud authentication settings used to derive request headers.
"""

from typing import Any, List, Optional

from .base import ExceptionContext, HelperKitError


class ConfigurationError(HelperKitError):
    """Base class for configuration-related errors."""

    def __init__(self, message: str, help_text: Optional[str] = None, error_code: str = "CONFIG_ERROR"):
        super().__init__(message, ExceptionContext(help_text=help_text, error_code=error_code))


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains invalid values."""

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        message = f"Invalid configuration for '{field}': got {repr(value)}, expected {expected}"
        help_text = (
            f"Fix '{field}' so it matches {expected}. "
            "Run 'helperkit config --show' to inspect the active values"
        )
        super().__init__(message, help_text, "CONFIG_INVALID")


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, config_location: Optional[str] = None):
        self.field = field
        message = f"Missing required configuration: '{field}'"
        help_text = "Set this value using 'helperkit config --set-auth'"
        if config_location:
            help_text += f" or add it to {config_location}"
        super().__init__(message, help_text, "CONFIG_MISSING")


class ConfigurationValidationError(ConfigurationError):
    """Raised when configuration fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "Configuration validation failed:"
        for error in errors:
            message += f"\n  - {error}"

        help_text = "Please check your configuration file and fix the validation errors listed above"
        super().__init__(message, help_text, "CONFIG_VALIDATION")
