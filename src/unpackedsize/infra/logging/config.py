from __future__ import annotations

"""
Logging Configuration Models.

Settings consumed by ``configure_logging``. The CLI builds one of these
from its diagnostic flags; tests build their own.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Sinks and formats for the diagnostic log.

    Attributes:
        level: Level name; unknown names resolve to WARNING.
        console: Mirror records to stderr.
        log_file: Rotated log file path, or None for console only.
        max_bytes: Rollover size of the log file.
        backup_count: Rotated segments kept next to the active file.
        console_fmt: Record layout on stderr.
        file_fmt: Record layout in the log file.
        datefmt: ``asctime`` layout in the log file.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
