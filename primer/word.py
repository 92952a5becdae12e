"""Palindrome tests for word games."""

from __future__ import annotations


def is_palindrome_naive(s: str) -> bool:
    """Compare the UTF-8 bytes of ``s`` front to back.

    Case, punctuation and multi-byte letters are not handled.
    """
    data = s.encode("utf-8", "surrogatepass")
    starts = (i for i, b in enumerate(data) if b & 0xC0 != 0x80)
    return all(data[i] == data[-1 - i] for i in starts)


def _lower(ch: str) -> str:
    return ch.lower()[0]


def is_palindrome(s: str) -> bool:
    """Report whether ``s`` reads the same both ways, ignoring case and non-letters."""
    letters = [_lower(ch) for ch in s if ch.isalpha()]
    return letters == letters[::-1]