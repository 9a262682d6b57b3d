from __future__ import annotations

"""
Logging Configuration Models.

Settings for the logging subsystem of the trie-map demo runner. Console
records stay short so they do not interleave badly with rendered trees on
stdout; the optional file keeps the full logger name of each record.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

DEFAULT_LOG_FILE: str = "triemap.log"

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for the logging subsystem.

    Attributes:
        level: Minimum severity level to capture.
        console: Write records to stderr.
        log_file: Path of a rotating log file, or None for console only.
        max_bytes: Size of a log segment before rotation.
        backup_count: Number of rotated segments to keep.
        console_fmt: Record format for the terminal.
        file_fmt: Record format for the log file.
        datefmt: Timestamp format.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 3

    console_fmt: str = "triemap %(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, *, debug: bool = False, log_file: Optional[str] = None) -> "LoggingConfig":
        """Settings used by the demo runner: INFO, or DEBUG when debugging."""
        return cls(level="DEBUG" if debug else "INFO", console=True, log_file=log_file)
