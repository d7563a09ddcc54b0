"""Command-line interface for the paragraph wrapper.

WHY: Editors and pre-commit hooks want to reflow a comment body or a
markdown snippet without writing Python. The CLI exposes reflow() over a
file or stdin.

HOW: argparse reads the input path, output path, line length, style and
indents. Defaults for the line length and style come from docwrap.config
(environment / .env). The text is reflowed paragraph by paragraph and
written to stdout or to the output file.

RULES:
- Usage:
    python -m docwrap input.md
    python -m docwrap input.md -o output.md --max-length 80 --style greedy
    cat input.md | python -m docwrap - --indent "  " --continuation-indent "    "
- --max-length off (or a negative number) disables wrapping; input is echoed.
- Exit codes: 0 = success, 1 = error.
- Status messages go to stderr; wrapped text goes to stdout (if no -o).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import (
    DEFAULT_MAX_LENGTH_RAW,
    DEFAULT_WRAPPING_STYLE_RAW,
    parse_max_length,
    parse_wrapping_style,
)
from .models import WrappingStyle
from .paragraph import reflow

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docwrap",
        description="Reflow documentation prose to a maximum line length.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Input file, or '-' for stdin (default: -)",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--max-length",
        default=DEFAULT_MAX_LENGTH_RAW,
        help="Maximum line length, or 'off' (default: %(default)s)",
    )
    parser.add_argument(
        "--style",
        default=DEFAULT_WRAPPING_STYLE_RAW,
        help="Wrapping style: {} (default: %(default)s)".format(
            ", ".join(style.value for style in WrappingStyle)
        ),
    )
    parser.add_argument(
        "--indent",
        default="",
        help="Prefix for the first line of each paragraph",
    )
    parser.add_argument(
        "--continuation-indent",
        default="",
        help="Prefix for the following lines of each paragraph",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Run the wrapper CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        max_length = parse_max_length(args.max_length)
        style = parse_wrapping_style(args.style)
    except ValueError as e:
        _status("Error: {}".format(e))
        sys.exit(1)

    try:
        if args.input == "-":
            raw = sys.stdin.read()
        else:
            with open(args.input, "r", encoding="utf-8") as f:
                raw = f.read()
    except (OSError, UnicodeDecodeError) as e:
        _status("Error: {}".format(e))
        sys.exit(1)

    if max_length is None:
        logger.debug("Wrapping disabled, echoing input")
        result = raw
    else:
        logger.debug("Reflowing with max_length=%d style=%s", max_length, style.value)
        result = reflow(
            raw,
            max_length,
            leading_indent=args.indent,
            continuation_indent=args.continuation_indent,
            style=style,
        )

    if result and not result.endswith("\n"):
        result += "\n"

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result)
        except OSError as e:
            _status("Error: {}".format(e))
            sys.exit(1)
        _status("Wrote reflowed text to {}".format(args.output))
    else:
        sys.stdout.write(result)


if __name__ == "__main__":
    main()
