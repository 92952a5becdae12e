"""SVG rendering of the 3-D surface z = sin(r) / r."""

from __future__ import annotations

import math
import sys

from primer.tempconv import _format_g

WIDTH, HEIGHT = 600, 320  # canvas size in pixels
CELLS = 100  # number of grid cells
XYRANGE = 30.0  # axis ranges (-XYRANGE..+XYRANGE)
XYSCALE = WIDTH / 2 / XYRANGE  # pixels per x or y unit
ZSCALE = HEIGHT * 2 / 5  # pixels per z unit
ANGLE = math.pi / 6  # angle of x, y axes (=30 degrees)

_SIN30, _COS30 = math.sin(ANGLE), math.cos(ANGLE)


def f(x: float, y: float) -> float:
    """Surface height at (x, y); NaN at the origin."""
    r = math.hypot(x, y)
    if r == 0:
        return math.nan
    return math.sin(r) / r


def corner(i: int, j: int) -> tuple[float, float]:
    """Project the corner of grid cell (i, j) onto the SVG canvas."""
    x = XYRANGE * (i / CELLS - 0.5)
    y = XYRANGE * (j / CELLS - 0.5)
    z = f(x, y)
    sx = WIDTH / 2 + (x - y) * _COS30 * XYSCALE
    sy = HEIGHT / 2 + (x + y) * _SIN30 * XYSCALE - z * ZSCALE
    return sx, sy


def svg() -> str:
    """Return the complete SVG document."""
    parts = [
        "<svg xmlns='http://www.w3.org/2000/svg' "
        "style='stroke: grey; fill: white; stroke-width: 0.7' "
        f"width='{WIDTH}' height='{HEIGHT}'>"
    ]
    for i in range(CELLS):
        for j in range(CELLS):
            points = (corner(i + 1, j), corner(i, j), corner(i, j + 1), corner(i + 1, j + 1))
            coords = " ".join(f"{_format_g(px)},{_format_g(py)}" for px, py in points)
            parts.append(f"<polygon points='{coords}'/>\n")
    parts.append("</svg>\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Write the SVG document to stdout."""
    sys.stdout.write(svg())
    return 0


if __name__ == "__main__":
    sys.exit(main())