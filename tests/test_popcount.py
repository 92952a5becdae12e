import pytest

from primer.popcount import pop_count

MASK = (1 << 64) - 1
SAMPLES = [0, 1, 0x1234567890ABCDEF, 0xFFFF0000FFFF0000, 0x8000000000000001, 12345]


def test_zero():
    assert pop_count(0) == 0


def test_all_bits_set():
    assert pop_count(MASK) == 64


def test_benchmark_value():
    assert pop_count(0x1234567890ABCDEF) == 32


@pytest.mark.parametrize("bit", range(64))
def test_single_bit(bit):
    assert pop_count(1 << bit) == 1


@pytest.mark.parametrize("x", SAMPLES)
@pytest.mark.parametrize("y", SAMPLES)
def test_union_and_intersection(x, y):
    assert pop_count(x | y) + pop_count(x & y) == pop_count(x) + pop_count(y)


@pytest.mark.parametrize("x", SAMPLES)
def test_complement(x):
    assert pop_count(x) + pop_count(x ^ MASK) == 64


def test_values_taken_modulo_two_to_the_64():
    assert pop_count(-1) == 64
    assert pop_count(1 << 64) == 0