from __future__ import annotations

"""
Domain Error Hierarchy.

Every failure below the CLI boundary is fatal to the current invocation.
The CLI alone maps these exceptions to process exit codes.
"""

from typing import Optional

# -----------------------------------------------------------------------------
# BASE ERROR
# -----------------------------------------------------------------------------

class UnpackedSizeError(Exception):
    """Root of all errors raised by the analysis layers."""

# -----------------------------------------------------------------------------
# CONCRETE ERRORS
# -----------------------------------------------------------------------------

class ConfigurationError(UnpackedSizeError):
    """Raised when an option value is rejected before any scanning starts."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Invalid option '{field}': {message}")
        self.field = field


class ProjectLoadError(UnpackedSizeError):
    """Raised when the target directory or its manifest cannot be loaded."""


class FileStatError(UnpackedSizeError):
    """
    Raised when an enumerated file cannot be stated.

    Attributes:
        rel_path: Project-relative path of the offending file.
    """

    def __init__(self, rel_path: str, cause: Optional[OSError] = None) -> None:
        reason = cause.strerror if cause is not None and cause.strerror else str(cause)
        super().__init__(f"Cannot stat '{rel_path}': {reason}")
        self.rel_path = rel_path
        self.cause = cause


class TreeContractError(UnpackedSizeError):
    """Raised when the enumerated file list repeats a path or mixes kinds at one name."""
