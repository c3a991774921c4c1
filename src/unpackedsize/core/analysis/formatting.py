from __future__ import annotations

"""
Size Formatting Helpers.

Shared by the text renderer and the JSON serializer so that both output
modes print identical sizes, percentages and sibling order for the same
tree.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import List

from unpackedsize.domain.size_models import SizeNode

# -----------------------------------------------------------------------------
# UNIT CONSTANTS
# -----------------------------------------------------------------------------

_UNIT_STEP: int = 1024
_UNITS: List[str] = ["KB", "MB", "GB"]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def display_size(size_bytes: int) -> str:
    """
    Render a byte count with binary units.

    Counts below 1024 print as plain bytes; larger counts are divided by
    1024 until they fit the unit (GB is the largest) and print with two
    decimals.

    Args:
        size_bytes: Raw byte count.

    Returns:
        str: Human string such as ``"511 B"`` or ``"9.01 KB"``.
    """
    if size_bytes < _UNIT_STEP:
        return f"{size_bytes} B"

    value = Decimal(size_bytes)
    unit = _UNITS[0]
    for unit in _UNITS:
        value = value / _UNIT_STEP
        if value < _UNIT_STEP:
            break

    return f"{_round_half_up(value, 2)} {unit}"


def percentage_of(size: int, total: int) -> float:
    """
    Compute the share of ``total`` held by ``size``, rounded to one decimal.

    Args:
        size: Byte size of the node.
        total: Grand total of the analysed package.

    Returns:
        float: Percentage, or 0.0 when the total is zero.
    """
    if total == 0:
        return 0.0
    return float(_round_half_up(Decimal(size) * 100 / Decimal(total), 1))


def format_percentage(size: int, total: int) -> str:
    """Percentage rendered with exactly one decimal."""
    return f"{percentage_of(size, total):.1f}"


def sorted_children(node: SizeNode) -> List[SizeNode]:
    """
    Order a node's children for presentation.

    Directories come before files; within a kind larger sizes come first.
    Equal entries keep their insertion order (the sort is stable).

    Args:
        node: Parent node.

    Returns:
        List[SizeNode]: Children in display order.
    """
    return sorted(node.children.values(), key=lambda c: (c.is_file, -c.size))

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _round_half_up(value: Decimal, places: int) -> Decimal:
    """Round away from zero on exact ties."""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
