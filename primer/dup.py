"""Report lines that occur more than once in the input."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def count_lines(stream: Iterable[str]) -> Counter[str]:
    """Count each line of a text stream, without its line terminator."""
    return Counter(_strip_eol(line) for line in stream)


def count_text(text: str) -> Counter[str]:
    """Count the pieces of ``text`` split on newlines, trailing piece included."""
    return Counter(text.split("\n"))


def duplicates(counts: Counter[str]) -> list[tuple[str, int]]:
    """Return ``(line, count)`` pairs for lines seen more than once, first seen first."""
    return [(line, n) for line, n in counts.items() if n > 1]


def main(argv: list[str] | None = None) -> int:
    """Print duplicated lines from the named files, or from stdin if none."""
    files = sys.argv[1:] if argv is None else list(argv)
    counts: Counter[str] = Counter()
    if not files:
        counts.update(count_lines(sys.stdin))
    else:
        for name in files:
            try:
                with open(name, encoding="utf-8", errors="replace", newline="") as f:
                    counts.update(count_lines(f))
            except OSError as err:
                reason = err.strerror or str(err)
                print(f"dup2: open {name}: {reason}", file=sys.stderr)
    for line, n in duplicates(counts):
        print(f"{n}\t{line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())