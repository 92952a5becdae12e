from dataclasses import dataclass

import pytest

from primer.equal import equal


class MyStr(str):
    pass


class Buffer:
    def __init__(self):
        self.data = []


@dataclass(eq=False)
class Link:
    value: str
    tail: "Link | None" = None


def _cycle_list():
    s = [None]
    s[0] = s
    return s


def _noop():
    pass


def _other_noop():
    pass


one, one_again, two = [1], [1], [2]
cycle1, cycle2 = _cycle_list(), _cycle_list()
shared = object()


@pytest.mark.parametrize(
    "x, y, want",
    [
        (1, 1, True),
        (1, 2, False),
        (1, 1.0, False),
        ("foo", "foo", True),
        ("foo", "bar", False),
        (MyStr("foo"), "foo", False),
        (["foo"], ["foo"], True),
        (["foo"], ["bar"], False),
        ([], [], True),
        (cycle1, cycle1, True),
        (cycle1, cycle2, True),
        ({"foo": [1, 2, 3]}, {"foo": [1, 2, 3]}, True),
        ({"foo": [1, 2, 3]}, {"foo": [1, 2, 3, 4]}, False),
        ({}, {}, True),
        ({"a": 1}, {"b": 1}, False),
        (one, one, True),
        (one, two, False),
        (one, one_again, True),
        (Buffer(), Buffer(), True),
        (None, None, True),
        (None, _noop, False),
        (_noop, _other_noop, False),
        (_noop, _noop, True),
        ((1, 2, 3), (1, 2, 3), True),
        ((1, 2, 3), (1, 2, 4), False),
        (shared, shared, True),
        (object(), object(), False),
        ([one], [one_again], True),
        ([one], [two], False),
    ],
)
def test_equal(x, y, want):
    assert equal(x, y) is want


def test_examples():
    assert equal([1, 2, 3], [1, 2, 3]) is True
    assert equal(["foo"], ["bar"]) is False


def test_nan_not_equal():
    nan = float("nan")
    assert equal(nan, nan) is False


def test_cyclic_links():
    a, b, c = Link("a"), Link("b"), Link("c")
    a.tail, b.tail, c.tail = b, a, c
    assert equal(a, a) is True
    assert equal(b, b) is True
    assert equal(c, c) is True
    assert equal(a, b) is False
    assert equal(a, c) is False