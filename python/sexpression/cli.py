"""Command line printer: parse S-expression files and print them back."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .errors import ParseError
from .parser import DEFAULT_MAX_DEPTH, parse
from .printer import render

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the ``sexpression`` command.

    Each file is parsed and its canonical rendering printed on stdout.  The
    first unreadable or malformed file stops the run with exit status 1.
    """
    parser = argparse.ArgumentParser(
        prog="sexpression",
        description="parse S-expression files and print them in canonical form",
    )
    parser.add_argument("files", nargs="+", type=Path, metavar="FILE",
                        help="path to an S-expression file")
    parser.add_argument("--max-depth", default=DEFAULT_MAX_DEPTH, type=int,
                        help=f"deepest list nesting accepted (default: {DEFAULT_MAX_DEPTH})")
    parser.add_argument("--encoding", default="utf-8", type=str,
                        help="encoding of the input files (default: utf-8)")
    parser.add_argument("--verbose", "-v", action="store_true", default=False,
                        help="log debug messages to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s: %(message)s",
    )

    for path in args.files:
        logger.debug(f"reading {path}")
        try:
            with path.open(encoding=args.encoding) as f:
                value = parse(f, max_depth=args.max_depth)
        except ParseError as e:
            print(f"{path}:{e}", file=sys.stderr)
            return 1
        except OSError as e:
            print(f"{path}: {e.strerror or e}", file=sys.stderr)
            return 1
        except UnicodeDecodeError as e:
            print(f"{path}: cannot decode as {args.encoding}: {e.reason}", file=sys.stderr)
            return 1
        print(render(value))
    return 0
