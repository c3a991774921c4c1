from __future__ import annotations

"""
Threshold Gate.

Compares the package total against an optional byte ceiling. The outcome
is returned as a value; deciding the process exit status is left to the
caller.
"""

import logging
from typing import Optional

from unpackedsize.domain.size_models import Exceeded, Ok, ThresholdResult

logger = logging.getLogger(__name__)


def check_threshold(total_size: int, ceiling: Optional[int]) -> ThresholdResult:
    """
    Evaluate the size ceiling.

    Args:
        total_size: Measured package total in bytes.
        ceiling: Maximum allowed bytes, or None to disable the gate.

    Returns:
        ThresholdResult: ``Exceeded`` only when ``total_size > ceiling``.
    """
    if ceiling is None:
        return Ok(total_size)

    if total_size > ceiling:
        logger.debug(f"Threshold exceeded: {total_size} > {ceiling} bytes.")
        return Exceeded(total_size=total_size, ceiling=ceiling)

    return Ok(total_size)
