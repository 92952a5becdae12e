"""Convert a PNG or JPEG image to JPEG."""

from __future__ import annotations

import io
import sys
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

_GRAY_MODES = {"1", "L", "LA", "I", "I;16", "F"}


def to_jpeg(source: BinaryIO, out: BinaryIO) -> str:
    """Decode the image in ``source``, write it to ``out`` as JPEG and return its format."""
    data = source.read()
    try:
        img = Image.open(io.BytesIO(data), formats=["PNG", "JPEG"])
        img.load()
    except UnidentifiedImageError as err:
        raise ValueError("image: unknown format") from err
    kind = (img.format or "").lower()
    print("Input format =", kind, file=sys.stderr)
    mode = "L" if img.mode in _GRAY_MODES else "RGB"
    if img.mode != mode:
        img = img.convert(mode)
    img.save(out, format="JPEG", quality=95)
    return kind


def main(argv: list[str] | None = None) -> int:
    """Read an image from stdin and write it as JPEG to stdout."""
    out = sys.stdout.buffer
    try:
        to_jpeg(sys.stdin.buffer, out)
    except (ValueError, OSError) as err:
        print(f"jpeg: {err}", file=sys.stderr)
        return 1
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())