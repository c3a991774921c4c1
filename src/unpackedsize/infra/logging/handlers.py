from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Handler factory for the rotated log file, plus the tag that marks
handlers owned by this package so a re-configuration never removes
handlers installed by the host application or the test runner.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

_HANDLER_TAG_ATTR: str = "_unpackedsize_handler"


def _tag_handler(handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Open the rotated log file, creating its parent directory.

    An unusable path only costs the file sink: a warning goes to stderr
    and the analysis carries on with console logging.

    Args:
        log_file: Log file path.
        level_int: Minimum level written to the file.
        formatter: Record formatter for the file.
        max_bytes: Size at which the file is rolled over.
        backup_count: Rolled-over segments to keep.

    Returns:
        Optional[RotatingFileHandler]: The tagged handler, or None.
    """
    try:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    handler.setLevel(level_int)
    handler.setFormatter(formatter)
    _tag_handler(handler)
    return handler
