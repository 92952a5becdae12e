"""Count Unicode characters and their UTF-8 lengths; drop duplicate lines."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

UTF_MAX = 4

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    "'": "\\'",
}


@dataclass
class CharCounts:
    """Character counts, counts of UTF-8 encoding lengths, and invalid bytes."""

    counts: Counter[str] = field(default_factory=Counter)
    utflen: list[int] = field(default_factory=lambda: [0] * (UTF_MAX + 1))
    invalid: int = 0


def _sequence_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _runes(data: bytes) -> Iterator[tuple[str | None, int]]:
    """Yield each character with its encoded length; invalid bytes yield ``(None, 1)``."""
    pos = 0
    while pos < len(data):
        n = _sequence_length(data[pos])
        if n:
            chunk = data[pos:pos + n]
            try:
                ch = chunk.decode("utf-8")
            except UnicodeDecodeError:
                ch = None
            if ch is not None:
                yield ch, n
                pos += n
                continue
        yield None, 1
        pos += 1


def char_counts(data: bytes) -> CharCounts:
    """Count the characters of UTF-8 ``data``."""
    result = CharCounts()
    for ch, n in _runes(data):
        if ch is None:
            result.invalid += 1
            continue
        result.counts[ch] += 1
        result.utflen[n] += 1
    return result


def _quote_rune(ch: str) -> str:
    code = ord(ch)
    if ch in _ESCAPES:
        body = _ESCAPES[ch]
    elif code < 0x20 or code == 0x7F:
        body = f"\\x{code:02x}"
    elif ch.isprintable():
        body = ch
    elif code < 0x10000:
        body = f"\\u{code:04x}"
    else:
        body = f"\\U{code:08x}"
    return f"'{body}'"


def format_counts(counts: CharCounts) -> str:
    """Render the counts as the tab-separated report."""
    parts = ["rune\tcount\n"]
    parts.extend(f"{_quote_rune(ch)}\t{n}\n" for ch, n in counts.counts.items())
    parts.append("\nlen\tcount\n")
    parts.extend(f"{i}\t{n}\n" for i, n in enumerate(counts.utflen[1:], start=1))
    if counts.invalid > 0:
        parts.append(f"\n{counts.invalid} invalid UTF-8 characters\n")
    return "".join(parts)


def dedup(lines: Iterable[str]) -> Iterator[str]:
    """Yield each distinct line once, at its first occurrence."""
    seen: set[str] = set()
    for line in lines:
        if line not in seen:
            seen.add(line)
            yield line


def main(argv: list[str] | None = None) -> int:
    """Run ``charcount`` or ``dedup`` over standard input."""
    parser = argparse.ArgumentParser(prog="charcount", description="Character tools.")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("charcount", help="count Unicode characters on stdin")
    sub.add_parser("dedup", help="print each distinct line of stdin once")
    opts = parser.parse_args(argv)

    if opts.command == "charcount":
        sys.stdout.write(format_counts(char_counts(sys.stdin.buffer.read())))
    else:
        stripped = (line.rstrip("\n").removesuffix("\r") for line in sys.stdin)
        for line in dedup(stripped):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())