"""Resonant four-pole ladder low-pass filter.

The filter advances its four state variables with a precomputed state
transition matrix: the matrix exponential of the ladder's Jacobian,
evaluated by a short Taylor series followed by repeated squaring. With
overdrive set, a sigmoid is applied to each stage for a non-linear
response.

Matrices are stored column-major. A "5x4" matrix holds 20 values: the
first four are the input column, the next sixteen the 4x4 state matrix.
"""

import math
from collections.abc import Sequence

from msfa.freqlut import FreqLut

LG_N = 6
N = 1 << LG_N

_Q24 = float(1 << 24)
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1

_TAYLOR_TERMS = 4
_SQUARINGS = 4
_MAX_RESONANCE = 3.98
_SCALES = (1.0, 1 / 2.0, 1 / 6.0, 1 / 24.0)
_LINEAR_LIMIT = 0.01


def compute_alpha(freqlut: FreqLut, logf: int) -> int:
    """Per-sample filter coefficient for a Q24 log2 cutoff, at most 1.0 in Q24."""
    return min(1 << 24, freqlut.lookup(logf))


def _matvec4(a: Sequence[float], b: Sequence[float]) -> list[float]:
    return [
        a[row] * b[0] + a[4 + row] * b[1] + a[8 + row] * b[2] + a[12 + row] * b[3]
        for row in range(4)
    ]


def _matmult4(a: Sequence[float], b: Sequence[float]) -> list[float]:
    return [v for col in range(4) for v in _matvec4(a, b[col * 4:col * 4 + 4])]


def make_state_transition(f0: int, k: int) -> list[float]:
    """State transition for cutoff coefficient ``f0`` and resonance ``k`` (both Q24).

    Returns 20 values: the input column followed by the 4x4 state matrix.
    Resonance is limited to 3.98.
    """
    f = f0 * (1.0 / (1 << (24 + _SQUARINGS)))
    k_f = min(k * (1.0 / _Q24), _MAX_RESONANCE)

    jac = [0.0] * 20
    jac[0] = f
    jac[4] = -f
    jac[5] = f
    jac[9] = -f
    jac[10] = f
    jac[14] = -f
    jac[15] = f
    jac[16] = -k_f * f
    jac[19] = -f

    a = [0.0] * 20
    a[4] = a[9] = a[14] = a[19] = 1.0

    c = list(jac)
    for i, scale in enumerate(_SCALES[:_TAYLOR_TERMS]):
        a = [ai + scale * ci for ai, ci in zip(a, c)]
        if i < _TAYLOR_TERMS - 1:
            c = _matvec4(c[4:], jac[:4]) + _matmult4(c[4:], jac[4:])

    for _ in range(_SQUARINGS):
        head = _matvec4(a[4:], a[:4])
        body = _matmult4(a[4:], a[4:])
        a = [ai + hi for ai, hi in zip(a[:4], head)] + body
    return a


def _sigmoid(x: float, overdrive: float) -> float:
    xs = overdrive * x * (1.0 / _Q24)
    return x / math.sqrt(1 + xs * xs)


def _to_sample(value: float) -> int:
    return max(_INT32_MIN, min(_INT32_MAX, int(value)))


class ResoFilter:
    """Ladder filter processing blocks of ``N`` Q24 samples.

    Controls are three Q24 values: log2 cutoff frequency in Hz, resonance
    (0..4) and overdrive.
    """

    def __init__(self, freqlut: FreqLut) -> None:
        self._freqlut = freqlut
        self._x = [0.0] * 4

    def process(
        self,
        inbuf: Sequence[int],
        control_in: Sequence[int],
        control_last: Sequence[int],
    ) -> list[int]:
        """Filter one block and return the output samples.

        Only ``control_in`` is used; ``control_last`` is accepted for
        interface compatibility with other modules.
        """
        samples = list(inbuf)
        if len(samples) != N:
            raise ValueError(f"input block must hold {N} samples, got {len(samples)}")
        controls = list(control_in)
        if len(controls) < 3:
            raise ValueError(f"expected 3 control values, got {len(controls)}")

        a = make_state_transition(compute_alpha(self._freqlut, controls[0]), controls[1])
        overdrive = controls[2] * (1.0 / _Q24)
        x = self._x
        out = []

        if overdrive < _LINEAR_LIMIT:
            state = a[4:]
            for signal in samples:
                tmp = _matvec4(state, x)
                x = [t + signal * b for t, b in zip(tmp, a[:4])]
                out.append(_to_sample(x[3]))
        else:
            ogain = 1 + overdrive
            k = controls[1] * (1.0 / _Q24)
            for i in range(4):
                a[4 + 5 * i] -= 1.0
                a[16 + i] += k * a[i]
            state = a[4:]
            for signal in samples:
                tx = [_sigmoid(v, overdrive) for v in x]
                tmp = _matvec4(state, tx)
                xin = _sigmoid(signal - k * x[3], overdrive)
                x = [v + t + xin * b for v, t, b in zip(x, tmp, a[:4])]
                out.append(_to_sample(x[3] * ogain))

        self._x = x
        return out