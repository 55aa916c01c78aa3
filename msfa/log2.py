"""Fixed-point base-2 logarithm by table lookup."""

import math

LG_N_SAMPLES = 9
N_SAMPLES = 1 << LG_N_SAMPLES
_SHIFT = 31 - LG_N_SAMPLES


def _build_table() -> tuple[int, ...]:
    """Interleaved table of (delta, value) pairs."""
    mul = 1 / math.log(2)
    values = [
        math.floor((mul * math.log(i + N_SAMPLES) + (7 - LG_N_SAMPLES)) * (1 << 24) + 0.5)
        for i in range(N_SAMPLES)
    ]
    table = [0] * (N_SAMPLES << 1)
    for i, value in enumerate(values):
        table[(i << 1) + 1] = value
    for i in range(N_SAMPLES - 1):
        table[i << 1] = values[i + 1] - values[i]
    table[(N_SAMPLES << 1) - 2] = (8 << 24) - values[-1]
    return tuple(table)


_TABLE = _build_table()


def lookup(x: int) -> int:
    """Log2 of an unsigned 32-bit Q24 value, as a Q24 result."""
    x &= 0xFFFFFFFF
    exp = 32 - (x | 1).bit_length()
    y = (x << exp) & 0xFFFFFFFF
    lowbits = y & ((1 << _SHIFT) - 1)
    y_int = (y >> (_SHIFT - 1)) & ((N_SAMPLES - 1) << 1)
    dz = _TABLE[y_int]
    z0 = _TABLE[y_int + 1]
    z = z0 + ((dz * lowbits) >> _SHIFT)
    return z - (exp << 24)