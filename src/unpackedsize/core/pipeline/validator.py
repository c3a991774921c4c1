from __future__ import annotations

"""
Option Validation Service.

Gatekeeper between untrusted option sources (command line, callers) and
the analysis engine. Merges defaults, coerces field types and rejects
values the engine cannot work with, before any file is scanned.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from unpackedsize.domain.config import AnalyzeOptions, get_default_options
from unpackedsize.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_options(
        options: Any,
        *,
        strict: bool = True,
) -> Tuple[AnalyzeOptions, List[str]]:
    """
    Validate and normalize raw analysis options.

    Args:
        options: Mapping of option names to raw values, or None.
        strict: If True, invalid values raise; otherwise they fall back to
                defaults and are reported as warnings.

    Returns:
        Tuple[AnalyzeOptions, List[str]]: The typed options and warnings.

    Raises:
        ConfigurationError: In strict mode, on the first invalid value.
    """
    warnings: List[str] = []
    defaults = get_default_options()

    if options is None:
        options = {}
    if not isinstance(options, dict):
        msg = f"expected a mapping, received {type(options).__name__}"
        if strict:
            raise ConfigurationError("options", msg)
        warnings.append(f"Invalid options: {msg}. Using defaults.")
        options = {}

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in options.items() if k in defaults})

    for unknown in sorted(set(options) - set(defaults)):
        warnings.append(f"Unknown option '{unknown}' ignored.")

    ceiling = _as_byte_count(
        merged.get("fail_if_exceeds_bytes"), defaults["fail_if_exceeds_bytes"],
        "fail_if_exceeds_bytes", warnings, strict,
    )
    json_output = _as_bool(
        merged.get("json_output"), defaults["json_output"], "json_output", warnings, strict,
    )

    for w in warnings:
        logger.warning(f"Option Constraint: {w}")

    return AnalyzeOptions(fail_if_exceeds_bytes=ceiling, json_output=json_output), warnings


def parse_byte_count(value: str) -> int:
    """
    Parse a strict, non-negative decimal byte count.

    Args:
        value: Raw text such as ``"1048576"``.

    Returns:
        int: Parsed byte count.

    Raises:
        ConfigurationError: If the text is not a non-negative integer.
    """
    text = (value or "").strip().replace("_", "")
    if not (text.isascii() and text.isdigit()):
        raise ConfigurationError(
            "fail_if_exceeds_bytes", f"expected a non-negative integer, received '{value}'"
        )
    return int(text)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_byte_count(
        value: Any, fallback: Optional[int], field: str, warnings: List[str], strict: bool
) -> Optional[int]:
    """Accept None, non-negative ints, and numeric strings."""
    if value is None:
        return fallback

    # bool is an int subclass and never a valid ceiling
    if isinstance(value, int) and not isinstance(value, bool):
        if value >= 0:
            return value
        msg = f"must be non-negative, received {value}"
    elif isinstance(value, str):
        try:
            return parse_byte_count(value)
        except ConfigurationError:
            if strict:
                raise
            msg = f"expected a non-negative integer, received '{value}'"
    else:
        msg = f"expected int, received {type(value).__name__}"

    if strict:
        raise ConfigurationError(field, msg)
    warnings.append(f"Invalid field '{field}': {msg}. Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce loose boolean inputs into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict and isinstance(value, str):
        s = value.strip().lower()
        if s in ("true", "1", "yes", "y"):
            warnings.append(f"Field '{field}' converted from '{value}' to True.")
            return True
        if s in ("false", "0", "no", "n"):
            warnings.append(f"Field '{field}' converted from '{value}' to False.")
            return False

    msg = f"expected bool, received {type(value).__name__}"
    if strict:
        raise ConfigurationError(field, msg)
    warnings.append(f"Invalid field '{field}': {msg}. Using fallback.")
    return fallback
