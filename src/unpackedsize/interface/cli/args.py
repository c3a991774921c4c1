from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into the raw option mapping consumed by the validator.
"""

import argparse
from typing import Any, Dict

from unpackedsize.core.pipeline.validator import parse_byte_count
from unpackedsize.domain.errors import ConfigurationError

PROG_NAME = "unpacked-size"
DESCRIPTION = (
    "Report the unpacked size of the files a package would publish, "
    "as a tree of directories and files."
)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(prog=PROG_NAME, description=DESCRIPTION)

    p.add_argument(
        "cwd",
        nargs="?",
        default=None,
        help="The directory to analyze (default: current directory).",
    )

    # --- Threshold Gate ---
    p.add_argument(
        "--fail-if-exceeds-bytes",
        dest="fail_if_exceeds_bytes",
        metavar="BYTES",
        type=_byte_count,
        default=None,
        help="Exit with code 1 if the unpacked size exceeds the specified bytes.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Output results as JSON.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this (rotated) log file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_options(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a raw option mapping.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Options for the validator.
    """
    return {
        "fail_if_exceeds_bytes": args.fail_if_exceeds_bytes,
        "json_output": bool(args.json_output),
    }

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _byte_count(value: str) -> int:
    """argparse ``type`` hook; a bad ceiling stops the run before scanning."""
    try:
        return parse_byte_count(value)
    except ConfigurationError as e:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got '{value}'") from e
