"""Fetch URLs, either one after another or all at once."""

from __future__ import annotations

import sys
import time
import urllib.error
import urllib.request
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed

_CHUNK = 64 * 1024


def _open(url: str):
    """Open ``url``; an HTTP error status still yields its response body."""
    try:
        return urllib.request.urlopen(url)
    except urllib.error.HTTPError as err:
        return err


def fetch(url: str) -> bytes:
    """Return the body found at ``url``."""
    with _open(url) as resp:
        return resp.read()


def fetch_report(url: str) -> str:
    """Fetch ``url`` and describe the elapsed time and size, or the error."""
    start = time.perf_counter()
    try:
        resp = _open(url)
    except (OSError, ValueError) as err:
        return str(err)
    with resp:
        try:
            nbytes = sum(len(chunk) for chunk in iter(lambda: resp.read(_CHUNK), b""))
        except OSError as err:
            return f"while reading {url}: {err}"
    secs = time.perf_counter() - start
    return f"{secs:.2f}s  {nbytes:7d}  {url}"


def fetch_all(urls: Iterable[str]) -> Iterator[str]:
    """Fetch all ``urls`` concurrently, yielding reports as they complete."""
    urls = list(urls)
    if not urls:
        return
    with ThreadPoolExecutor(max_workers=len(urls)) as pool:
        futures = [pool.submit(fetch_report, url) for url in urls]
        for future in as_completed(futures):
            yield future.result()


def _write_bytes(data: bytes) -> None:
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(data.decode("utf-8", errors="replace"))
        return
    sys.stdout.flush()
    buffer.write(data)
    buffer.flush()


def main(argv: list[str] | None = None) -> int:
    """Print the content at each URL; stop at the first failure."""
    urls = sys.argv[1:] if argv is None else list(argv)
    for url in urls:
        try:
            resp = _open(url)
        except (OSError, ValueError) as err:
            print(f"fetch: {err}", file=sys.stderr)
            return 1
        with resp:
            try:
                body = resp.read()
            except OSError as err:
                print(f"fetch: reading {url}: {err}", file=sys.stderr)
                return 1
        _write_bytes(body)
    return 0


def fetch_all_main(argv: list[str] | None = None) -> int:
    """Fetch URLs in parallel and report their times and sizes."""
    urls = sys.argv[1:] if argv is None else list(argv)
    start = time.perf_counter()
    for report in fetch_all(urls):
        print(report)
    print(f"{time.perf_counter() - start:.2f}s elapsed")
    return 0


if __name__ == "__main__":
    sys.exit(main())