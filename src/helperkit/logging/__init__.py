"""
helperkit logging package.

- config: runtime logging configuration
- formatters: JSON, console and Rich output
- loggers: logger wrapper with correlation IDs and keyword context
- manager: centralized handler setup

Usage:
    from helperkit.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Request sent", method="GET", status=200)
"""

from .config import LoggingConfig
from .formatters import ContextFormatter, JsonFormatter
from .loggers import HelperKitLogger
from .manager import LoggingManager, configure_logging, logging_manager

get_logger = logging_manager.get_logger

__all__ = [
    "ContextFormatter",
    "HelperKitLogger",
    "JsonFormatter",
    "LoggingConfig",
    "LoggingManager",
    "configure_logging",
    "get_logger",
    "logging_manager",
]
