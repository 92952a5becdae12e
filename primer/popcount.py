"""Population count of 64-bit unsigned integers using a byte lookup table."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1


def _build_table() -> bytes:
    table = bytearray(256)
    for i in range(256):
        table[i] = table[i >> 1] + (i & 1)
    return bytes(table)


# _PC[i] is the population count of i.
_PC = _build_table()


def pop_count(x: int) -> int:
    """Return the number of set bits in ``x`` taken as an unsigned 64-bit value."""
    return sum(_PC[b] for b in (x & _MASK64).to_bytes(8, "little"))