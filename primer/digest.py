"""Compare the SHA-256 digests of two strings."""

from __future__ import annotations

import hashlib
import sys
from typing import NamedTuple


class DigestComparison(NamedTuple):
    """Hex digests of two inputs and whether they are equal."""

    first: str
    second: str
    same: bool


def _digest(value: str | bytes) -> bytes:
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    return hashlib.sha256(data).digest()


def compare_digests(x: str | bytes, y: str | bytes) -> DigestComparison:
    """Hash ``x`` and ``y`` with SHA-256 and compare the results."""
    dx, dy = _digest(x), _digest(y)
    return DigestComparison(dx.hex(), dy.hex(), dx == dy)


def main(argv: list[str] | None = None) -> int:
    """Print both digests, whether they match, and the digest's type."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        args = ["x", "X"]
    if len(args) != 2:
        print("usage: digest [first second]", file=sys.stderr)
        return 2
    result = compare_digests(args[0], args[1])
    print(result.first)
    print(result.second)
    print("true" if result.same else "false")
    print("[32]uint8")
    return 0


if __name__ == "__main__":
    sys.exit(main())