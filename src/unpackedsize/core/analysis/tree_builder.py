from __future__ import annotations

"""
Size Tree Builder.

Folds a flat list of publishable files into a hierarchy of directory and
file nodes, aggregating byte sizes at every level.
"""

import logging
from typing import Iterable

from unpackedsize.domain.errors import TreeContractError
from unpackedsize.domain.size_models import FileEntry, SizeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_size_tree(files: Iterable[FileEntry]) -> SizeNode:
    """
    Build the aggregated size tree for a package.

    Each entry is walked from the synthetic root: intermediate segments
    become directory nodes (created lazily and accumulating the size),
    the final segment becomes a file node holding the file's own size.

    Args:
        files: Stated files, one per publishable relative path.

    Returns:
        SizeNode: Unnamed root whose size is the package total.

    Raises:
        TreeContractError: If a path is empty or listed twice, or a name is
            used both as a file and as a directory.
    """
    root = SizeNode(name="")
    count = 0

    for entry in files:
        parts = [p for p in entry.parts if p]
        if not parts:
            raise TreeContractError(f"File entry has no path segments ({entry.size} bytes)")

        root.size += entry.size
        current = root
        last_index = len(parts) - 1

        for i, part in enumerate(parts):
            is_last = i == last_index
            node = current.children.get(part)

            if node is None:
                node = SizeNode(name=part, is_file=is_last)
                current.children[part] = node
            elif is_last:
                if node.is_file:
                    raise TreeContractError(f"Duplicate file entry: {entry.rel_path}")
                raise TreeContractError(
                    f"'{entry.rel_path}' is listed as a file but is also a directory"
                )
            elif node.is_file:
                raise TreeContractError(
                    f"'{'/'.join(parts[:i + 1])}' is a file but '{entry.rel_path}' lies beneath it"
                )

            if is_last:
                node.size = entry.size
            else:
                node.size += entry.size
            current = node

        count += 1

    logger.debug(f"Size tree built from {count} files ({root.size} bytes).")
    return root
