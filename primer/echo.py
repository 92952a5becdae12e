"""Print command-line arguments."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO


def join_args(args: Sequence[str]) -> str:
    """Join arguments with single spaces."""
    return " ".join(args)


def echo(newline: bool, sep: str, args: Sequence[str], out: TextIO | None = None) -> None:
    """Write ``args`` joined by ``sep`` to ``out``, with a newline if asked."""
    if out is None:
        out = sys.stdout
    out.write(sep.join(args))
    if newline:
        out.write("\n")


def hello() -> str:
    """Return the greeting."""
    return "Hello, 世界"


def main(argv: list[str] | None = None) -> int:
    """Echo the arguments, honouring ``-n`` and ``-s SEP``."""
    parser = argparse.ArgumentParser(prog="echo", description="Print arguments.")
    parser.add_argument("-n", action="store_true", help="omit trailing newline")
    parser.add_argument("-s", default=" ", help="separator")
    parser.add_argument("args", nargs="*")
    opts = parser.parse_args(argv)
    echo(not opts.n, opts.s, opts.args)
    return 0


if __name__ == "__main__":
    sys.exit(main())