from __future__ import annotations

"""
Analysis Configuration Model.

Holds the immutable option set that drives a single analysis run.
Values reach this model only through the validator, so every field
is already typed and range-checked.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalyzeOptions:
    """
    Validated options for one analysis invocation.

    Attributes:
        fail_if_exceeds_bytes: Optional byte ceiling for the threshold gate.
        json_output: Emit the structured document instead of the text tree.
    """
    fail_if_exceeds_bytes: Optional[int] = None
    json_output: bool = False


def get_default_options() -> Dict[str, Any]:
    """
    Generate the default raw option mapping.

    Returns:
        Dict[str, Any]: Option names mapped to their default values.
    """
    return {
        "fail_if_exceeds_bytes": None,
        "json_output": False,
    }
