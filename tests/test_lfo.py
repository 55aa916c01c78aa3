import pytest

from msfa.lfo import Lfo

RATE = 44100.0
ONE = 1 << 24


def _lfo(rate=50, delay=0, sync=0, waveform=0):
    lfo = Lfo(RATE)
    lfo.reset([rate, delay, 0, 0, sync, waveform])
    return lfo


def _samples(lfo, count=500):
    return [lfo.getsample() for _ in range(count)]


@pytest.mark.parametrize("waveform", [0, 1, 2, 4])
def test_continuous_waveforms_stay_in_range(waveform):
    values = _samples(_lfo(rate=70, waveform=waveform))
    assert all(0 <= v <= ONE for v in values)
    assert max(values) - min(values) > ONE // 2


def test_square_has_two_levels():
    values = set(_samples(_lfo(rate=70, waveform=3)))
    assert values == {0, ONE}


def test_saw_down_and_up_are_complementary():
    down = _samples(_lfo(rate=60, waveform=1))
    up = _samples(_lfo(rate=60, waveform=2))
    assert all(d + u == ONE - 1 for d, u in zip(down, up))


def test_sample_and_hold_steps():
    values = _samples(_lfo(rate=99, waveform=5), 2000)
    assert all(v % (1 << 16) == 0 for v in values)
    assert all((1 << 16) <= v <= (256 << 16) for v in values)
    assert len(set(values)) > 1


def test_unknown_waveform_is_centre():
    assert set(_samples(_lfo(waveform=6), 10)) == {1 << 23}


def test_sync_restarts_phase():
    a = _lfo(rate=40, sync=1, waveform=0)
    b = _lfo(rate=40, sync=1, waveform=0)
    _samples(a, 123)
    a.keydown()
    b.keydown()
    assert _samples(a, 50) == _samples(b, 50)


def test_without_sync_keydown_keeps_phase():
    a = _lfo(rate=40, waveform=2)
    b = _lfo(rate=40, waveform=2)
    a.keydown()
    assert _samples(a, 20) == _samples(b, 20)


def test_no_delay_gives_full_depth():
    lfo = _lfo(delay=0)
    lfo.keydown()
    lfo.getdelay()
    assert [lfo.getdelay() for _ in range(10)] == [ONE] * 10


def test_delay_ramps_up_to_full_depth():
    lfo = _lfo(delay=99)
    lfo.keydown()
    values = [lfo.getdelay() for _ in range(5000)]
    assert values[0] == 0
    assert values[-1] == ONE
    assert all(b >= a for a, b in zip(values, values[1:]))
    assert any(0 < v < ONE for v in values)


def test_keydown_restarts_delay():
    lfo = _lfo(delay=99)
    lfo.keydown()
    for _ in range(5000):
        lfo.getdelay()
    lfo.keydown()
    assert lfo.getdelay() == 0


def test_accepts_unpacked_patch_bytes():
    lfo = Lfo(RATE)
    lfo.reset(bytes([34, 33, 0, 0, 0, 3]))
    assert set(_samples(lfo, 200)) <= {0, ONE}


def test_wrong_parameter_count_raises():
    with pytest.raises(ValueError):
        Lfo(RATE).reset([1, 2, 3])


def test_bad_sample_rate_raises():
    with pytest.raises(ValueError):
        Lfo(0)