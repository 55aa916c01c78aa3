import math

import pytest

from msfa.freqlut import FreqLut


@pytest.fixture(scope="module")
def lut():
    return FreqLut(44100.0)


def _logfreq(hz):
    return int((1 << 24) * math.log2(hz))


@pytest.mark.parametrize("hz", [27.5, 110.0, 440.0, 1000.0, 4186.0, 15000.0])
def test_lookup_matches_frequency(lut, hz):
    expected = hz / 44100.0 * (1 << 24)
    assert abs(lut.lookup(_logfreq(hz)) - expected) <= expected * 1e-3 + 1


@pytest.mark.parametrize("hz", [55.0, 440.0, 2000.0])
def test_octave_doubles_delta(lut, hz):
    low = lut.lookup(_logfreq(hz))
    high = lut.lookup(_logfreq(hz) + (1 << 24))
    assert abs(high - 2 * low) <= 2


def test_lookup_is_monotonic(lut):
    values = [lut.lookup(x) for x in range(10 << 24, 14 << 24, 1 << 18)]
    assert values == sorted(values)


def test_sample_rate_changes_delta():
    a = FreqLut(44100.0).lookup(_logfreq(440.0))
    b = FreqLut(22050.0).lookup(_logfreq(440.0))
    assert abs(b - 2 * a) <= 2


def test_too_high_raises(lut):
    with pytest.raises(ValueError):
        lut.lookup(21 << 24)


def test_bad_sample_rate():
    with pytest.raises(ValueError):
        FreqLut(0)