"""PNG images of the Mandelbrot set and other complex-plane functions."""

from __future__ import annotations

import argparse
import cmath
import sys
from collections.abc import Callable
from typing import BinaryIO

from PIL import Image

Color = tuple[int, int, int]

XMIN, YMIN, XMAX, YMAX = -2, -2, 2, 2
WIDTH, HEIGHT = 1024, 1024
BLACK: Color = (0, 0, 0)


def _gray(y: int) -> Color:
    y &= 0xFF
    return (y, y, y)


def _ycbcr(y: int, cb: int, cr: int) -> Color:
    """Convert a Y'CbCr triple to RGB with fixed-point arithmetic."""
    yy1 = y * 0x10101
    cb1 = cb - 128
    cr1 = cr - 128

    def clamp(v: int) -> int:
        if v < 0:
            return 0
        if v > 0xFFFFFF:
            return 255
        return v >> 16

    return (
        clamp(yy1 + 91881 * cr1),
        clamp(yy1 - 22554 * cb1 - 46802 * cr1),
        clamp(yy1 + 116130 * cb1),
    )


def _byte(x: float) -> int:
    return (int(x * 128) + 127) & 0xFF


def mandelbrot(z: complex) -> Color:
    """Shade ``z`` by how quickly it escapes under v = v*v + z."""
    iterations = 200
    contrast = 15
    v = 0j
    for n in range(iterations):
        v = v * v + z
        if abs(v) > 2:
            return _gray(255 - contrast * n)
    return BLACK


def acos(z: complex) -> Color:
    """Colour ``z`` by its complex arc cosine."""
    v = cmath.acos(z)
    return _ycbcr(192, _byte(v.real), _byte(v.imag))


def sqrt(z: complex) -> Color:
    """Colour ``z`` by its complex square root."""
    v = cmath.sqrt(z)
    return _ycbcr(128, _byte(v.real), _byte(v.imag))


def newton(z: complex) -> Color:
    """Shade ``z`` by how fast Newton's method converges to a root of z**4 - 1."""
    iterations = 37
    contrast = 7
    try:
        for i in range(iterations):
            z -= (z - 1 / (z * z * z)) / 4
            if abs(z * z * z * z - 1) < 1e-6:
                return _gray(255 - contrast * i)
    except (ZeroDivisionError, OverflowError):
        pass
    return BLACK


def render(
    out: BinaryIO,
    shade: Callable[[complex], Color] = mandelbrot,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> None:
    """Write a PNG of ``shade`` over the square [-2, 2] x [-2, 2]."""
    img = Image.new("RGB", (width, height))
    img.putdata([
        shade(complex(px / width * (XMAX - XMIN) + XMIN, py / height * (YMAX - YMIN) + YMIN))
        for py in range(height)
        for px in range(width)
    ])
    img.save(out, format="PNG")


_FUNCTIONS = {"mandelbrot": mandelbrot, "acos": acos, "sqrt": sqrt, "newton": newton}


def main(argv: list[str] | None = None) -> int:
    """Write a PNG image of the chosen function to stdout."""
    parser = argparse.ArgumentParser(prog="mandelbrot", description="Emit a fractal PNG.")
    parser.add_argument("--func", choices=sorted(_FUNCTIONS), default="mandelbrot")
    opts = parser.parse_args(argv)
    out = sys.stdout.buffer
    render(out, _FUNCTIONS[opts.func])
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())