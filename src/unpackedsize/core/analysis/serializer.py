from __future__ import annotations

"""
Size Tree Serializer.

Produces the machine-readable equivalent of the rendered tree: nested
records with raw byte counts, human sizes, percentages and the full
project-relative path of every node.
"""

from typing import Any, Dict, List

from unpackedsize.core.analysis.formatting import display_size, percentage_of, sorted_children
from unpackedsize.domain.size_models import SizeNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def serialize_size_tree(root: SizeNode, total_size: int) -> Dict[str, Any]:
    """
    Build the top-level JSON document for a package.

    Args:
        root: Root node returned by the tree builder.
        total_size: Grand total used for percentages.

    Returns:
        Dict[str, Any]: ``totalSizeBytes``, ``totalSize`` and ``entries``.
    """
    return {
        "totalSizeBytes": total_size,
        "totalSize": display_size(total_size),
        "entries": [serialize_node(child, total_size) for child in sorted_children(root)],
    }


def serialize_node(node: SizeNode, total_size: int, parent_path: str = "") -> Dict[str, Any]:
    """
    Serialize ``node`` and its subtree.

    Args:
        node: Node to serialize.
        total_size: Grand total used for percentages.
        parent_path: Slash-joined path of the ancestors below the root.

    Returns:
        Dict[str, Any]: Record with the same ordering rule as the renderer.
    """
    current_path = f"{parent_path}/{node.name}" if parent_path else node.name
    children: List[Dict[str, Any]] = [
        serialize_node(child, total_size, current_path) for child in sorted_children(node)
    ]

    return {
        "name": node.name,
        "path": current_path,
        "sizeBytes": node.size,
        "size": display_size(node.size),
        "percentage": percentage_of(node.size, total_size),
        "isFile": node.is_file,
        "children": children,
    }
