"""String helpers: base names, digit grouping and list formatting."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable


def basename(s: str) -> str:
    """Remove directory components and a trailing ``.suffix``.

    e.g. a => a, a.go => a, a/b/c.go => c, a/b.c.go => b.c
    """
    s = s[s.rfind("/") + 1:]
    dot = s.rfind(".")
    if dot >= 0:
        s = s[:dot]
    return s


def comma(s: str) -> str:
    """Insert commas every three digits in a non-negative decimal integer string."""
    if len(s) <= 3:
        return s
    head = len(s) % 3 or 3
    groups = [s[:head]]
    groups.extend(s[i:i + 3] for i in range(head, len(s), 3))
    return ",".join(groups)


def ints_to_string(values: Iterable[int]) -> str:
    """Format integers like ``[1, 2, 3]``."""
    return "[" + ", ".join(str(v) for v in values) + "]"


def main(argv: list[str] | None = None) -> int:
    """Run one of the ``basename``, ``comma`` or ``printints`` commands."""
    parser = argparse.ArgumentParser(prog="text", description="String helpers.")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("basename", help="print the base name of each line of stdin")
    comma_parser = sub.add_parser("comma", help="group digits with commas")
    comma_parser.add_argument("numbers", nargs="*")
    ints_parser = sub.add_parser("printints", help="print integers as a list")
    ints_parser.add_argument("values", nargs="*", type=int)
    opts = parser.parse_args(argv)

    if opts.command == "basename":
        for line in sys.stdin:
            print(basename(line.rstrip("\n").removesuffix("\r")))
    elif opts.command == "comma":
        for number in opts.numbers:
            print(f"  {comma(number)}")
    else:
        print(ints_to_string(opts.values or [1, 2, 3]))
    return 0


if __name__ == "__main__":
    sys.exit(main())