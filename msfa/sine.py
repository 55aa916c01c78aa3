"""Fixed-point sine: table lookup and polynomial approximations.

Phases are Q24 (``1 << 24`` is one full cycle) unless stated otherwise.
Results are Q24 amplitudes (``1 << 24`` is 1.0).
"""

import math

LG_N_SAMPLES = 10
N_SAMPLES = 1 << LG_N_SAMPLES

_R = 1 << 29
_SHIFT = 24 - LG_N_SAMPLES

# Chebyshev coefficients for the Q24 approximation.
_C8_0 = 16777216
_C8_2 = -331168742
_C8_4 = 1089453524
_C8_6 = -1430910663
_C8_8 = 950108533

# Coefficients for the Q30 approximation.
_C10_0 = 1 << 30
_C10_2 = -1324675874
_C10_4 = 1089501821
_C10_6 = -1433689867
_C10_8 = 1009356886
_C10_10 = -421101352


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _build_table() -> tuple[int, ...]:
    """Interleaved table of (delta, value) pairs, one pair per sample."""
    dphase = 2 * math.pi / N_SAMPLES
    c = math.floor(math.cos(dphase) * (1 << 30) + 0.5)
    s = math.floor(math.sin(dphase) * (1 << 30) + 0.5)
    u = 1 << 30
    v = 0
    values = [0] * N_SAMPLES
    half = N_SAMPLES // 2
    for i in range(half):
        sample = (v + 32) >> 6
        values[i] = sample
        values[i + half] = -sample
        t = _to_int32((u * s + v * c + _R) >> 30)
        u = _to_int32((u * c - v * s + _R) >> 30)
        v = t
    table = [0] * (N_SAMPLES << 1)
    for i, value in enumerate(values):
        table[(i << 1) + 1] = value
    for i in range(N_SAMPLES - 1):
        table[i << 1] = values[i + 1] - values[i]
    table[(N_SAMPLES << 1) - 2] = -values[-1]
    return tuple(table)


_TABLE = _build_table()


def lookup(phase: int) -> int:
    """Sine of a Q24 phase by linear interpolation in the table."""
    lowbits = phase & ((1 << _SHIFT) - 1)
    phase_int = (phase >> (_SHIFT - 1)) & ((N_SAMPLES - 1) << 1)
    dy = _TABLE[phase_int]
    y0 = _TABLE[phase_int + 1]
    return y0 + ((dy * lowbits) >> _SHIFT)


def compute(phase: int) -> int:
    """Sine of a Q24 phase by polynomial evaluation, no table needed."""
    x = (phase & ((1 << 23) - 1)) - (1 << 22)
    x2 = (x * x) >> 16
    y = (_C8_8 * x2) >> 32
    y = ((y + _C8_6) * x2) >> 32
    y = ((y + _C8_4) * x2) >> 32
    y = ((y + _C8_2) * x2) >> 32
    y = _to_int32(y + _C8_0)
    return y ^ -((phase >> 23) & 1)


def compute10(phase: int) -> int:
    """More accurate sine: Q30 phase in, Q30 amplitude out."""
    x = (phase & ((1 << 29) - 1)) - (1 << 28)
    x2 = (x * x) >> 26
    y = (_C10_10 * x2) >> 34
    y = ((y + _C10_8) * x2) >> 34
    y = ((y + _C10_6) * x2) >> 34
    y = ((y + _C10_4) * x2) >> 32
    y = ((y + _C10_2) * x2) >> 30
    y = _to_int32(y + _C10_0)
    return y ^ -((phase >> 29) & 1)