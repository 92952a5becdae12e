"""Animated GIFs of random Lissajous figures."""

from __future__ import annotations

import io
import logging
import math
import random
import sys
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import BinaryIO

from PIL import Image

CYCLES = 5  # number of complete x oscillator revolutions
RES = 0.001  # angular resolution
SIZE = 100  # image canvas covers [-SIZE..+SIZE]
NFRAMES = 64  # number of animation frames
DELAY = 8  # delay between frames in 10ms units

WHITE_INDEX = 0
BLACK_INDEX = 1
_PALETTE = [255, 255, 255, 0, 0, 0]

_log = logging.getLogger(__name__)


def _angles() -> list[float]:
    limit = CYCLES * 2 * math.pi
    angles = []
    t = 0.0
    while t < limit:
        angles.append(t)
        t += RES
    return angles


def lissajous(out: BinaryIO, rng: random.Random | None = None) -> None:
    """Write an animated GIF of a Lissajous figure with a random y frequency."""
    if rng is None:
        rng = random.Random()
    freq = rng.random() * 3.0
    side = 2 * SIZE + 1
    angles = _angles()
    xs = [SIZE + int(math.sin(t) * SIZE + 0.5) for t in angles]
    frames = []
    phase = 0.0
    for _ in range(NFRAMES):
        pixels = bytearray(side * side)
        for t, px in zip(angles, xs):
            py = SIZE + int(math.sin(t * freq + phase) * SIZE + 0.5)
            if 0 <= px < side and 0 <= py < side:
                pixels[py * side + px] = BLACK_INDEX
        frame = Image.frombytes("P", (side, side), bytes(pixels))
        frame.putpalette(_PALETTE)
        frames.append(frame)
        phase += 0.1
    frames[0].save(
        out,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=DELAY * 10,
        loop=NFRAMES,
    )


class _GifHandler(BaseHTTPRequestHandler):
    def log_message(self, format, *args):
        _log.debug(format, *args)

    def do_GET(self) -> None:
        buf = io.BytesIO()
        lissajous(buf)
        body = buf.getvalue()
        self.send_response(200)
        self.send_header("Content-Type", "image/gif")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


def main(argv: list[str] | None = None) -> int:
    """Write a GIF to stdout, or serve one per request with the ``web`` argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args and args[0] == "web":
        with ThreadingHTTPServer(("localhost", 8000), _GifHandler) as httpd:
            httpd.serve_forever()
        return 0
    out = sys.stdout.buffer
    lissajous(out)
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())