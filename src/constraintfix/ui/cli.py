from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from constraintfix.app import fix_project_constraints
from constraintfix.config import ConfigurationError, configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

_FIX_DESCRIPTION = """\
Run constraints on the project and try to fix every error automatically, asking
for confirmation before each change. Errors that cannot be fixed automatically
(invalid dependencies) make the command exit with a non-zero code; otherwise an
install is run when at least one manifest changed.
"""


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Constraints-related commands")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fix = subparsers.add_parser(
        "fix",
        help="Make the project constraint-compliant if possible",
        description=_FIX_DESCRIPTION,
        epilog="Example: constraintfix fix",
    )
    fix.add_argument(
        "--cwd",
        type=Path,
        default=None,
        help="Directory to search the project from (default: current directory)",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        configure_logging()
        parsed_args = _parse_args(args_list)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    try:
        status = fix_project_constraints(
            cwd=parsed_args.cwd or Path.cwd(),
            stdin=sys.stdin,
            stdout=sys.stdout,
        )
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during constraints fix")
        sys.exit(1)

    if status != 0:
        sys.exit(status)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
