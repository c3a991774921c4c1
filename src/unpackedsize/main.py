from __future__ import annotations

"""
Console Script Entry Point.

Installs a last-resort exception hook so an unexpected crash is logged
with its traceback and ends the process with the error status, then hands
control to the CLI controller.
"""

import logging
import os
import sys
import traceback
from types import TracebackType
from typing import List, Optional, Type

# Running this file directly from a checkout needs src/ on the path
_SRC_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _SRC_DIR not in sys.path:
    sys.path.insert(0, _SRC_DIR)

from unpackedsize.domain.analysis_models import EXIT_ERROR  # noqa: E402

# -----------------------------------------------------------------------------
# CRASH SUPERVISOR
# -----------------------------------------------------------------------------

def global_exception_handler(
        exctype: Type[BaseException],
        value: BaseException,
        tb: Optional[TracebackType],
) -> None:
    """
    Report an exception that escaped every layer below.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    logging.getLogger("unpackedsize.supervisor").critical(f"Unhandled exception: {value}\n{stack_trace}")

    sys.stderr.write("\n" + "=" * 80 + "\n")
    sys.stderr.write("CRITICAL ERROR (UNPACKED-SIZE)\n")
    sys.stderr.write("=" * 80 + "\n")
    sys.stderr.write(stack_trace)


sys.excepthook = global_exception_handler

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI under the crash supervisor.

    Args:
        argv: Optional command line arguments. Defaults to sys.argv.

    Returns:
        int: The CLI exit status, or the error status after a crash.
    """
    try:
        from unpackedsize.interface.cli.app import main as cli_main
        return cli_main(argv)
    except Exception as e:
        global_exception_handler(type(e), e, e.__traceback__)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
