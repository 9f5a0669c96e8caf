"""
Centralized logging setup.

``LoggingManager`` is a process-wide singleton. It only ever removes the
handlers it installed itself, so handlers added by an application or a test
harness survive reconfiguration.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

from .config import LoggingConfig
from .formatters import ContextFormatter, JsonFormatter, create_rich_handler
from .loggers import HelperKitLogger

DEFAULT_LOG_FILE = Path("logs/helperkit.log")


class LoggingManager:
    """Installs handlers for the helperkit loggers."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.config: Optional[LoggingConfig] = None
            self.handlers: List[logging.Handler] = []
            self._initialized = True

    def configure(self, config: LoggingConfig):
        """Replace this manager's handlers with the ones ``config`` describes."""
        self.reset()
        self.config = config

        root_logger = logging.getLogger()
        root_logger.setLevel(config.level)

        for output in config.output:
            handler = self._build_handler(output, config)
            handler.setLevel(config.level)
            root_logger.addHandler(handler)
            self.handlers.append(handler)

        logging.getLogger("helperkit").setLevel(config.level)
        for name in config.quiet_loggers:
            logging.getLogger(name).setLevel(max(config.level, logging.WARNING))

    def reset(self):
        """Detach and close the handlers installed by ``configure``."""
        root_logger = logging.getLogger()
        for handler in self.handlers:
            root_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

    def _build_handler(self, output: str, config: LoggingConfig) -> logging.Handler:
        if output == "console":
            return self._console_handler(config)
        if output == "file":
            return self._file_handler(config)
        raise ValueError(f"Unknown log output: {output}")

    def _formatter(self, config: LoggingConfig) -> logging.Formatter:
        if config.format_type == "json":
            return JsonFormatter(config.service_name, config.version)
        return ContextFormatter()

    def _console_handler(self, config: LoggingConfig) -> logging.Handler:
        if config.format_type == "rich":
            return create_rich_handler()
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(self._formatter(config))
        return handler

    def _file_handler(self, config: LoggingConfig) -> logging.Handler:
        path = Path(config.file_path) if config.file_path else DEFAULT_LOG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(self._formatter(config))
        return handler

    def get_logger(self, name: str, correlation_id: Optional[str] = None) -> HelperKitLogger:
        return HelperKitLogger(name, correlation_id)


logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Configure the global logging system."""
    logging_manager.configure(config)
