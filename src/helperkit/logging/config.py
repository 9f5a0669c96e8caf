"""
Runtime logging configuration.

``LoggingConfig`` is what ``configure_logging`` consumes. It is usually built
from the ``[logging]`` section of the configuration file with
``LoggingConfig.from_section``.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from ..constants import DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_FILE_SIZE_BYTES

# Third-party loggers that are noisy at DEBUG/INFO
QUIET_LOGGERS = ("httpx", "httpcore")


@dataclass
class LoggingConfig:
    """Handlers, format and level for the helperkit loggers."""

    level: Union[str, int] = logging.INFO
    format_type: str = "console"  # "console", "json", "rich"
    output: Union[str, List[str]] = field(default_factory=lambda: ["console"])
    file_path: Optional[Path] = None
    max_file_size: int = DEFAULT_LOG_FILE_SIZE_BYTES
    backup_count: int = DEFAULT_LOG_BACKUP_COUNT
    service_name: str = "helperkit"
    version: str = "unknown"
    quiet_loggers: Tuple[str, ...] = QUIET_LOGGERS

    def __post_init__(self):
        if isinstance(self.level, str):
            self.level = getattr(logging, self.level.upper())
        if isinstance(self.output, str):
            self.output = [self.output]

    @classmethod
    def from_section(cls, section: Any, verbosity: int = 0, version: str = "unknown") -> "LoggingConfig":
        """Build from a ``[logging]`` config section.

        ``verbosity`` raises the level: 1 for INFO, 2 or more for DEBUG.
        """
        level = section.level.value
        if verbosity == 1:
            level = "INFO"
        elif verbosity > 1:
            level = "DEBUG"

        return cls(
            level=level,
            format_type=section.format,
            output=list(section.output),
            file_path=section.file_path,
            max_file_size=section.max_file_size,
            backup_count=section.backup_count,
            version=version,
        )
