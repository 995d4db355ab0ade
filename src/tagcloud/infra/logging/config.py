from __future__ import annotations

"""
Logging Configuration Models.

Holds the settings the CLI resolves from '--debug' and '--log-file'
before the queue-based logging pipeline is started.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Level names accepted in LoggingConfig.level
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings for one tagcloud run.

    Attributes:
        level: Root level name; unknown names resolve to INFO.
        console: Mirror records to stderr so stdout stays clean for --json.
        log_file: Rotating diagnostics file, or None for console only.
        max_bytes: Size of a log file before it is rotated.
        backup_count: Rotated files kept next to the active one.
        console_fmt: Record format on stderr.
        file_fmt: Record format in the log file.
        datefmt: Timestamp format in the log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool, log_file: Optional[str] = None) -> LoggingConfig:
        """Build the configuration matching the CLI diagnostic flags."""
        return cls(level="DEBUG" if debug else "INFO", console=True, log_file=log_file or None)
