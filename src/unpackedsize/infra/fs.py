from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization for user input and the read-only stat pass
that turns enumerated relative paths into sized file records.
"""

import logging
import os
import re
from typing import Iterable, List, Optional, Tuple

from unpackedsize.domain.errors import FileStatError
from unpackedsize.domain.size_models import FileEntry

logger = logging.getLogger(__name__)

# Either separator may appear, whatever the host platform uses
_SEPARATORS_RX = re.compile(r"[\\/]+" if os.sep == "\\" else r"/+")

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def split_relative_path(rel_path: str) -> Tuple[str, ...]:
    """
    Split a relative path into its non-empty segments.

    Leading, trailing and repeated separators are dropped, as are
    current-directory (".") segments.

    Args:
        rel_path: Path relative to the project root.

    Returns:
        Tuple[str, ...]: Ordered path segments.
    """
    return tuple(p for p in _SEPARATORS_RX.split(rel_path) if p and p != ".")

# -----------------------------------------------------------------------------
# STAT API
# -----------------------------------------------------------------------------

def stat_pack_files(root: str, rel_paths: Iterable[str]) -> List[FileEntry]:
    """
    Stat every enumerated file once.

    Args:
        root: Absolute project directory.
        rel_paths: Relative file paths produced by the enumerator.

    Returns:
        List[FileEntry]: One sized record per path, in input order.

    Raises:
        FileStatError: On the first file that cannot be stated.
    """
    entries: List[FileEntry] = []

    for rel in rel_paths:
        parts = split_relative_path(rel)
        full_path = os.path.join(root, *parts)
        try:
            st = os.stat(full_path)
        except OSError as e:
            logger.debug(f"Stat failed for '{rel}': {e}")
            raise FileStatError(rel, e) from e
        entries.append(FileEntry(parts=parts, size=st.st_size))

    logger.debug(f"Stated {len(entries)} files under {root}.")
    return entries
