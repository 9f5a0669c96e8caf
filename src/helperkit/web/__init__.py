"""Async web helpers, their factories and the sync runner."""

from .client import AsyncWebHelpers
from .factory import (
    create_web_helpers,
    create_web_helpers_for,
    create_web_helpers_from_config,
)
from .models import HttpMethod, WebResponse
from .sync import run_sync

__all__ = [
    "AsyncWebHelpers",
    "HttpMethod",
    "WebResponse",
    "create_web_helpers",
    "create_web_helpers_for",
    "create_web_helpers_from_config",
    "run_sync",
]
