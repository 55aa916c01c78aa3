"""Conversion of a Q24 log frequency (1.0 = one octave) to a phase delta."""

import math

LG_N_SAMPLES = 10
N_SAMPLES = 1 << LG_N_SAMPLES
SAMPLE_SHIFT = 24 - LG_N_SAMPLES
MAX_LOGFREQ_INT = 20


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


class FreqLut:
    """Lookup table from log frequency to per-sample Q24 phase increment."""

    def __init__(self, sample_rate: float) -> None:
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        self.sample_rate = sample_rate
        y = (1 << (24 + MAX_LOGFREQ_INT)) / sample_rate
        inc = math.pow(2, 1.0 / N_SAMPLES)
        lut = []
        for _ in range(N_SAMPLES + 1):
            lut.append(math.floor(y + 0.5))
            y *= inc
        self._lut = tuple(lut)

    def lookup(self, logfreq: int) -> int:
        """Phase delta for ``logfreq``, log2 of the frequency in Hz, in Q24.

        Results above 20 octaves cannot be represented and raise ValueError.
        """
        logfreq = _to_int32(logfreq)
        hibits = logfreq >> 24
        if hibits > MAX_LOGFREQ_INT:
            raise ValueError("log frequency exceeds the supported range")
        ix = (logfreq & 0xFFFFFF) >> SAMPLE_SHIFT
        y0 = self._lut[ix]
        y1 = self._lut[ix + 1]
        lowbits = logfreq & ((1 << SAMPLE_SHIFT) - 1)
        y = y0 + (((y1 - y0) * lowbits) >> SAMPLE_SHIFT)
        return y >> (MAX_LOGFREQ_INT - hibits)