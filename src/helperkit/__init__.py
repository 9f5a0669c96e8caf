"""
helperkit: typed async HTTP helpers and Windows interop utilities

A small library for calling JSON web APIs with a consistent authentication
header per cloud provider, plus helpers for COM inspection, secure string
handling and running async work from synchronous code.

Architecture Overview:
- Web: AsyncWebHelpers over httpx, factories and the sync runner
- Core: configuration (pydantic + TOML) and security primitives
- Interop: COM object inspection and activation (Windows)
- CLI: command-line interface for ad-hoc requests and configuration
- Shared: cross-cutting concerns like logging and exceptions
"""

__version__ = "0.1.0"

from .core.config import CloudProvider, ConfigManager, HelperKitConfig, WebHelperOptions
from .core.security import SecureString, reveal
from .exceptions import HelperKitError
from .web import (
    AsyncWebHelpers,
    HttpMethod,
    WebResponse,
    create_web_helpers,
    create_web_helpers_for,
    create_web_helpers_from_config,
    run_sync,
)

__all__ = [
    "AsyncWebHelpers",
    "CloudProvider",
    "ConfigManager",
    "HelperKitConfig",
    "HelperKitError",
    "HttpMethod",
    "SecureString",
    "WebHelperOptions",
    "WebResponse",
    "create_web_helpers",
    "create_web_helpers_for",
    "create_web_helpers_from_config",
    "reveal",
    "run_sync",
]
