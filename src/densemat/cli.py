"""
Command-line demo for densemat.

Usage:
    python -m densemat [--verbose] [--log-level LEVEL]

Builds one RowVector, one ColVector and one DenseMatrix, then prints each
rendering followed by its dimensions.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

from ._typing import MatrixLike
from .config import get_log_level, set_log_level
from .dense import DenseMatrix
from .vector import ColVector, RowVector

logger = logging.getLogger("densemat.cli")


def describe(container: MatrixLike, out: TextIO) -> None:
    """Print a container's rendering and its ``rows cols`` line."""
    out.write(str(container))
    rows, cols = container.dimensions()
    out.write(f"{rows} {cols}\n")


def run_demo(out: TextIO) -> int:
    containers = [
        RowVector(3, [1.0, 2.0, 3.0]),
        ColVector(3, [4.0, 5.0, 6.0]),
        DenseMatrix(2, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]),
    ]
    for container in containers:
        logger.debug("Describing %r", container)
        describe(container, out)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="densemat",
        description="densemat demo: build and print sample containers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the sample containers
  python -m densemat

  # Show debug logging
  python -m densemat -v

  # Log at info level (same as DENSEMAT_LOG_LEVEL=info)
  python -m densemat --log-level info
""",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output (same as --log-level debug)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Log level (default: DENSEMAT_LOG_LEVEL or warning)",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)
    elif args.log_level:
        set_log_level(args.log_level)

    logging.basicConfig(
        level=get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    return run_demo(sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
