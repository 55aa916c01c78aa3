"""FM operator kernels rendering one block of ``N`` samples.

Phases and frequencies are Q24 (``1 << 24`` is one cycle). Gains are Q24
and move in a linear ramp across the block: the gain for sample ``i`` is
``gain1 + (1 + i) / N * (gain2 - gain1)``.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from msfa import sine

LG_N = 6
N = 1 << LG_N


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


@dataclass
class FeedbackState:
    """The last two outputs of a self-modulating operator."""

    y0: int = 0
    y: int = 0


def _block(values: Sequence[int], name: str) -> list[int]:
    block = list(values)
    if len(block) != N:
        raise ValueError(f"{name} must hold {N} samples, got {len(block)}")
    return block


def _gains(gain1: int, gain2: int) -> Iterator[int]:
    dgain = _to_int32(gain2 - gain1 + (N >> 1)) >> LG_N
    gain = _to_int32(gain1)
    for _ in range(N):
        gain = _to_int32(gain + dgain)
        yield gain


def _phases(phase0: int, freq: int) -> Iterator[int]:
    phase = _to_int32(phase0)
    for _ in range(N):
        yield phase
        phase = _to_int32(phase + freq)


def _finish(values: list[int], add_to: Sequence[int] | None) -> list[int]:
    if add_to is None:
        return values
    base = _block(add_to, "add_to")
    return [_to_int32(a + v) for a, v in zip(base, values)]


def compute(
    inputs: Sequence[int],
    phase0: int,
    freq: int,
    gain1: int,
    gain2: int,
    add_to: Sequence[int] | None = None,
) -> list[int]:
    """A plain FM operator: a sine whose phase is modulated by ``inputs``.

    If ``add_to`` is given, the operator's output is added to it.
    """
    modulation = _block(inputs, "inputs")
    values = [
        _to_int32((sine.lookup(phase + x) * gain) >> 24)
        for phase, x, gain in zip(_phases(phase0, freq), modulation, _gains(gain1, gain2))
    ]
    return _finish(values, add_to)


def compute_pure(
    phase0: int,
    freq: int,
    gain1: int,
    gain2: int,
    add_to: Sequence[int] | None = None,
) -> list[int]:
    """An unmodulated sine generator."""
    values = [
        _to_int32((sine.lookup(phase) * gain) >> 24)
        for phase, gain in zip(_phases(phase0, freq), _gains(gain1, gain2))
    ]
    return _finish(values, add_to)


def compute_fb(
    phase0: int,
    freq: int,
    gain1: int,
    gain2: int,
    fb_state: FeedbackState,
    fb_shift: int,
    add_to: Sequence[int] | None = None,
) -> list[int]:
    """An operator modulated by its own output; updates ``fb_state``."""
    y0 = fb_state.y0
    y = fb_state.y
    values = []
    for phase, gain in zip(_phases(phase0, freq), _gains(gain1, gain2)):
        scaled_fb = _to_int32(y0 + y) >> (fb_shift + 1)
        y0 = y
        y = _to_int32((sine.lookup(phase + scaled_fb) * gain) >> 24)
        values.append(y)
    fb_state.y0 = y0
    fb_state.y = y
    return _finish(values, add_to)