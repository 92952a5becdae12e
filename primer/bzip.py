"""A writer that bzip2-compresses what is written to it, and a command using it."""

from __future__ import annotations

import bz2
import shutil
import sys
import time
from typing import BinaryIO

BLOCK_SIZE = 9


class Writer:
    """Compress written bytes with bzip2 and pass the result to ``out``.

    Closing flushes the compressed stream but leaves ``out`` open.
    """

    def __init__(self, out: BinaryIO) -> None:
        self._out = out
        self._compressor: bz2.BZ2Compressor | None = bz2.BZ2Compressor(BLOCK_SIZE)

    def write(self, data: bytes) -> int:
        """Compress ``data`` and return the number of uncompressed bytes taken."""
        if self._compressor is None:
            raise ValueError("closed")
        data = bytes(data)
        chunk = self._compressor.compress(data)
        if chunk:
            self._out.write(chunk)
        return len(data)

    def close(self) -> None:
        """Flush the rest of the compressed stream; the writer cannot be used after."""
        if self._compressor is None:
            raise ValueError("closed")
        compressor, self._compressor = self._compressor, None
        self._out.write(compressor.flush())

    def __enter__(self) -> Writer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._compressor is not None:
            self.close()


def _fatal(message: str) -> int:
    print(f"{time.strftime('%Y/%m/%d %H:%M:%S')} {message}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Compress standard input to standard output."""
    out = sys.stdout.buffer
    w = Writer(out)
    try:
        shutil.copyfileobj(sys.stdin.buffer, w)
    except OSError as err:
        return _fatal(f"bzipper: {err}")
    try:
        w.close()
        out.flush()
    except OSError as err:
        return _fatal(f"bzipper: close: {err}")
    return 0


if __name__ == "__main__":
    sys.exit(main())