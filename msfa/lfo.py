"""Low frequency oscillator with DX7-compatible rates, delay and waveforms."""

from collections.abc import Sequence

from msfa import sine

_N = 64
_MASK32 = 0xFFFFFFFF
_HALF = 1 << 31
_Q24_ONE = 1 << 24

TRIANGLE = 0
SAW_DOWN = 1
SAW_UP = 2
SQUARE = 3
SINE = 4
SAMPLE_AND_HOLD = 5


class Lfo:
    """One LFO; outputs and delay values are 0..1 in Q24."""

    def __init__(self, sample_rate: float) -> None:
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        # 1 << 32 / 15.5s / 11, per block of samples
        self._unit = int(_N * 25190424 / sample_rate + 0.5) & _MASK32
        self._phase = 0
        self._delta = 0
        self._waveform = 0
        self._randstate = 0
        self._sync = False
        self._delaystate = 0
        self._delayinc = 0
        self._delayinc2 = 0

    def reset(self, params: Sequence[int]) -> None:
        """Load rate, delay, (unused), (unused), sync and waveform."""
        values = list(params)
        if len(values) != 6:
            raise ValueError(f"LFO parameters must be 6 values, got {len(values)}")
        rate = values[0]
        sr = 1 if rate == 0 else (165 * rate) >> 6
        sr *= 11 if sr < 160 else 11 + ((sr - 160) >> 4)
        self._delta = (self._unit * sr) & _MASK32
        a = 99 - values[1]
        if a == 99:
            self._delayinc = _MASK32
            self._delayinc2 = _MASK32
        else:
            a = (16 + (a & 15)) << (1 + (a >> 4))
            self._delayinc = (self._unit * a) & _MASK32
            a = max(0x80, a & 0xFF80)
            self._delayinc2 = (self._unit * a) & _MASK32
        self._waveform = values[5] & 0xFF
        self._sync = values[4] != 0

    def getsample(self) -> int:
        """Advance one block and return the waveform value."""
        self._phase = (self._phase + self._delta) & _MASK32
        phase = self._phase
        waveform = self._waveform
        if waveform == TRIANGLE:
            x = phase >> 7
            if phase >> 31:
                x ^= _MASK32
            return x & (_Q24_ONE - 1)
        if waveform == SAW_DOWN:
            return ((~phase & _MASK32) ^ _HALF) >> 8
        if waveform == SAW_UP:
            return (phase ^ _HALF) >> 8
        if waveform == SQUARE:
            return ((~phase & _MASK32) >> 7) & _Q24_ONE
        if waveform == SINE:
            return (1 << 23) + (sine.lookup(phase >> 8) >> 1)
        if waveform == SAMPLE_AND_HOLD:
            if phase < self._delta:
                self._randstate = (self._randstate * 179 + 17) & 0xFF
            return ((self._randstate ^ 0x80) + 1) << 16
        return 1 << 23

    def getdelay(self) -> int:
        """Advance the onset delay and return the current depth scale."""
        delta = self._delayinc if self._delaystate < _HALF else self._delayinc2
        d = (self._delaystate + delta) & _MASK32
        if d < self._delayinc:
            return _Q24_ONE
        self._delaystate = d
        if d < _HALF:
            return 0
        return (d >> 7) & (_Q24_ONE - 1)

    def keydown(self) -> None:
        """Restart the delay and, with sync on, the phase."""
        if self._sync:
            self._phase = _HALF - 1
        self._delaystate = 0