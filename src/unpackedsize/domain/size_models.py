from __future__ import annotations

"""
Size Tree Data Models.

Provides the flat file records produced by the stat layer, the mutable
aggregation node used while building the hierarchy, and the threshold
gate outcomes.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple, Union

# -----------------------------------------------------------------------------
# INPUT RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileEntry:
    """
    One publishable file and its on-disk size.

    Attributes:
        parts: Relative path split into non-empty segments.
        size: Byte size reported by stat.
    """
    parts: Tuple[str, ...]
    size: int

    @property
    def rel_path(self) -> str:
        return "/".join(self.parts)

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class SizeNode:
    """
    Directory or file node of the aggregated size tree.

    Attributes:
        name: Single path segment labelling this node.
        size: Aggregate byte size of every file beneath (or the file itself).
        is_file: Node kind, fixed at creation.
        children: Child nodes keyed by name, in insertion order.
    """
    name: str
    size: int = 0
    is_file: bool = False
    children: Dict[str, "SizeNode"] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# THRESHOLD OUTCOMES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Ok:
    """Total size is within the ceiling (or no ceiling was configured)."""
    total_size: int


@dataclass(frozen=True)
class Exceeded:
    """Total size is strictly greater than the configured ceiling."""
    total_size: int
    ceiling: int


ThresholdResult = Union[Ok, Exceeded]
