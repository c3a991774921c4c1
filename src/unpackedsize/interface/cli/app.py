from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, option validation,
analysis execution and report rendering. This is the only layer that
prints or decides the process exit status.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from unpackedsize.core.analysis.formatting import display_size
from unpackedsize.core.analysis.serializer import serialize_size_tree
from unpackedsize.core.analysis.tree_renderer import render_size_tree
from unpackedsize.core.pipeline.engine import run_analysis
from unpackedsize.core.pipeline.validator import validate_options
from unpackedsize.domain.analysis_models import EXIT_ERROR, AnalysisResult
from unpackedsize.domain.errors import ConfigurationError, UnpackedSizeError
from unpackedsize.domain.size_models import Exceeded
from unpackedsize.infra.logging import LoggingConfig, configure_logging, get_logger
from unpackedsize.interface.cli import args as cli_args

logger = get_logger(__name__)

THRESHOLD_ERROR_MESSAGE = "Bundle size exceeds limit"

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 when the size ceiling is exceeded, 2 on errors.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase (invalid ceilings exit with status 2 here)
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Option validation, before any scanning
    try:
        options, _ = validate_options(cli_args.args_to_options(args), strict=True)
    except ConfigurationError as e:
        return _report_error(str(e), json_output=bool(args.json_output))

    # 4. Analysis phase
    try:
        result = run_analysis(args.cwd, options)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
    except UnpackedSizeError as e:
        logger.debug("Analysis aborted.", exc_info=True)
        return _report_error(str(e), json_output=options.json_output)

    # 5. Output rendering phase
    if options.json_output:
        print(json.dumps(serialize_size_tree(result.tree, result.total_size), ensure_ascii=False, indent=2))
    else:
        _print_human_report(result)

    # 6. Threshold verdict
    if isinstance(result.threshold, Exceeded):
        _report_exceeded(result.threshold, json_output=options.json_output)

    return result.exit_code

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_human_report(result: AnalysisResult) -> None:
    """Print the total line followed by the size tree."""
    print(f"Total unpacked size: {display_size(result.total_size)}")
    for line in render_size_tree(result.tree, result.total_size):
        print(line)


def _report_exceeded(outcome: Exceeded, *, json_output: bool) -> None:
    """Write the threshold failure notice to stderr."""
    logger.debug(f"Ceiling {outcome.ceiling} bytes exceeded by {outcome.total_size - outcome.ceiling} bytes.")
    if json_output:
        payload: Dict[str, Any] = {
            "error": THRESHOLD_ERROR_MESSAGE,
            "size": outcome.total_size,
            "limit": outcome.ceiling,
        }
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        return

    print(
        f"Bundle size exceeds {display_size(outcome.ceiling)} "
        f"(measured {display_size(outcome.total_size)})",
        file=sys.stderr,
    )


def _report_error(message: str, *, json_output: bool) -> int:
    """Report a fatal error on stderr and return the error exit status."""
    logger.debug(f"Fatal: {message}")
    if json_output:
        print(json.dumps({"error": message}, ensure_ascii=False), file=sys.stderr)
    else:
        print(f"ERROR: {message}", file=sys.stderr)
    return EXIT_ERROR

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
