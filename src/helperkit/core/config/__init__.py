"""
Configuration management for helperkit.

Usage:
    from helperkit.core.config import ConfigManager

    config = ConfigManager().load_config()
    options = config.cloud_auth
    options.get_auth_header_name()
"""

from ...exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from .manager import ConfigManager
from .models import (
    CloudProvider,
    HelperKitConfig,
    HelperKitSettings,
    HttpClientConfig,
    LoggingConfig,
    LogLevel,
    WebHelperOptions,
)

__all__ = [
    # Configuration models
    "HelperKitConfig",
    "HelperKitSettings",
    "WebHelperOptions",
    "HttpClientConfig",
    "LoggingConfig",
    "LogLevel",
    "CloudProvider",
    # Configuration management
    "ConfigManager",
    # Exceptions
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "ConfigurationValidationError",
]
