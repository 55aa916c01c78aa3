import math

import pytest

from msfa import log2


@pytest.mark.parametrize(
    "x", [1, 7, 1000, 1 << 20, 12345678, 1 << 24, 3 << 24, 987654321, 0x7FFFFFFF, 0xFFFFFFFF]
)
def test_lookup_matches_log2(x):
    ideal = (1 << 24) * math.log2(x / (1 << 24))
    assert abs(log2.lookup(x) - ideal) < 32


def test_unity_is_zero():
    assert log2.lookup(1 << 24) == 0


@pytest.mark.parametrize("shift", range(0, 31))
def test_powers_of_two_are_exact(shift):
    assert log2.lookup(1 << shift) == (shift - 24) << 24


@pytest.mark.parametrize("x", [5000, 1 << 22, 77777777])
def test_doubling_adds_one(x):
    assert log2.lookup(2 * x) - log2.lookup(x) == 1 << 24


def test_monotonic():
    values = [log2.lookup(x) for x in range(1 << 24, 1 << 25, 1 << 16)]
    assert values == sorted(values)