from __future__ import annotations

"""
Tree Renderer.

Converts the aggregated size tree into indented text lines with
line-drawing connectors, human sizes and percentages.
"""

from typing import List

from unpackedsize.core.analysis.formatting import display_size, format_percentage, sorted_children
from unpackedsize.domain.size_models import SizeNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_size_tree(root: SizeNode, total_size: int) -> List[str]:
    """
    Render every visible node below the synthetic root.

    Args:
        root: Root node returned by the tree builder.
        total_size: Grand total used for percentages.

    Returns:
        List[str]: One line per node, depth-first in display order.
    """
    lines: List[str] = []
    children = sorted_children(root)
    total = len(children)

    for i, child in enumerate(children):
        render_node(child, total_size, lines, prefix="", is_last=(i == total - 1))

    return lines


def render_node(
        node: SizeNode,
        total_size: int,
        lines: List[str],
        prefix: str = "",
        is_last: bool = True,
) -> None:
    """
    Append the line for ``node`` and recurse into its children.

    Args:
        node: Node to print.
        total_size: Grand total used for percentages.
        lines: Accumulator list for output strings.
        prefix: Indentation inherited from the ancestors.
        is_last: Whether ``node`` is the last of its siblings.
    """
    connector = "└──" if is_last else "├──"
    size_str = display_size(node.size)
    pct_str = format_percentage(node.size, total_size)
    lines.append(f"{prefix}{connector} {node.name} {size_str} ({pct_str}%)")

    children = sorted_children(node)
    child_prefix = prefix + ("   " if is_last else "│  ")
    total = len(children)
    for i, child in enumerate(children):
        render_node(child, total_size, lines, prefix=child_prefix, is_last=(i == total - 1))
