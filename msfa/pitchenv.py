"""The DX7 pitch envelope: four rates and four levels, output in Q24/octave."""

from collections.abc import Sequence

_N = 64

RATE_TABLE = (
    1, 2, 3, 3, 4, 4, 5, 5, 6, 6, 7, 7, 8, 8, 9, 9, 10, 10, 11, 11, 12,
    12, 13, 13, 14, 14, 15, 16, 16, 17, 18, 18, 19, 20, 21, 22, 23, 24,
    25, 26, 27, 28, 30, 31, 33, 34, 36, 37, 38, 39, 41, 42, 44, 46, 47,
    49, 51, 53, 54, 56, 58, 60, 62, 64, 66, 68, 70, 72, 74, 76, 79, 82,
    85, 88, 91, 94, 98, 102, 106, 110, 115, 120, 125, 130, 135, 141, 147,
    153, 159, 165, 171, 178, 185, 193, 202, 211, 232, 243, 254, 255,
)

PITCH_TABLE = (
    -128, -116, -104, -95, -85, -76, -68, -61, -56, -52, -49, -46, -43,
    -41, -39, -37, -35, -33, -32, -31, -30, -29, -28, -27, -26, -25, -24,
    -23, -22, -21, -20, -19, -18, -17, -16, -15, -14, -13, -12, -11, -10,
    -9, -8, -7, -6, -5, -4, -3, -2, -1, 0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10,
    11, 12, 13, 14, 15, 16, 17, 18, 19, 20, 21, 22, 23, 24, 25, 26, 27,
    28, 29, 30, 31, 32, 33, 34, 35, 38, 40, 43, 46, 49, 53, 58, 65, 73,
    82, 92, 103, 115, 127,
)

_STAGES = 4
_SUSTAIN = 3


def _params(values: Sequence[int], name: str) -> tuple[int, ...]:
    result = tuple(int(v) for v in values)
    if len(result) != _STAGES:
        raise ValueError(f"{name} must hold {_STAGES} values, got {len(result)}")
    if any(not 0 <= v <= 99 for v in result):
        raise ValueError(f"{name} must be in the range 0..99")
    return result


class PitchEnv:
    """Pitch envelope advanced once per block of samples."""

    def __init__(self, sample_rate: float) -> None:
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        self._unit = int(_N * (1 << 24) / (21.3 * sample_rate) + 0.5)
        self._rates = (0,) * _STAGES
        self._levels = (0,) * _STAGES
        self._level = 0
        self._target = 0
        self._rising = False
        self._ix = _STAGES
        self._inc = 0
        self._down = True

    def set(self, rates: Sequence[int], levels: Sequence[int]) -> None:
        """Load DX7 rates and levels (0..99 each) and start the attack."""
        self._rates = _params(rates, "rates")
        self._levels = _params(levels, "levels")
        self._level = PITCH_TABLE[self._levels[3]] << 19
        self._down = True
        self._advance(0)

    def getsample(self) -> int:
        """Advance one block and return the pitch offset in Q24/octave."""
        if self._ix < _SUSTAIN or (self._ix < _STAGES and not self._down):
            if self._rising:
                self._level += self._inc
                if self._level >= self._target:
                    self._level = self._target
                    self._advance(self._ix + 1)
            else:
                self._level -= self._inc
                if self._level <= self._target:
                    self._level = self._target
                    self._advance(self._ix + 1)
        return self._level

    def keydown(self, down: bool) -> None:
        """Press (restart the attack) or release (start the release stage)."""
        if self._down != down:
            self._down = down
            self._advance(0 if down else _SUSTAIN)

    def _advance(self, newix: int) -> None:
        self._ix = newix
        if newix < _STAGES:
            self._target = PITCH_TABLE[self._levels[newix]] << 19
            self._rising = self._target > self._level
            self._inc = RATE_TABLE[self._rates[newix]] * self._unit