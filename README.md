# msfa

Fixed-point signal-processing building blocks for a DX7-style FM
synthesizer, in pure Python with no dependencies.

Values follow fixed-point conventions throughout: phases are Q24
(`1 << 24` is one full cycle), amplitudes and gains are Q24
(`1 << 24` is 1.0), and log frequencies are Q24 log2 values of the
frequency in Hz (`1 << 24` is one octave).

## Modules

- `msfa.sine`: `lookup(phase)` interpolates in a 1024-entry sine
  table; `compute(phase)` is a polynomial approximation with Q24 in and
  out; `compute10(phase)` is a more accurate one with Q30 in and out.
- `msfa.freqlut`: `FreqLut(sample_rate)`. Its `lookup(logfreq)` turns a
  Q24 log2 frequency into a per-sample Q24 phase increment. Log
  frequencies above 20 octaves raise `ValueError`.
- `msfa.log2`: `lookup(x)` gives the log2 of an unsigned 32-bit Q24
  value as a Q24 result.
- `msfa.patch`: `unpack_patch(bulk)` expands a 128-byte packed voice
  from a DX7 bulk dump into the 156-byte unpacked parameter layout.
  Input of any other length raises `ValueError`.
- `msfa.fm_op_kernel`: the operator kernels `compute` (phase-modulated
  by an input block), `compute_pure` (plain sine) and `compute_fb`
  (self-modulating, with its state kept in a `FeedbackState`). Each
  returns a new list of 64 samples; pass a 64-sample block as `add_to`
  to have the output added to it. Gain ramps linearly from `gain1`
  towards `gain2` across the block.
- `msfa.lfo`: `Lfo(sample_rate)`, a DX7-compatible low-frequency
  oscillator. `reset(params)` takes six values (rate, delay, two unused
  values, sync, waveform); `getsample()` and `getdelay()` advance it one
  block; `keydown()` restarts the delay and, with sync on, the phase.
- `msfa.pitchenv`: `PitchEnv(sample_rate)`, the DX7 pitch envelope.
  `set(rates, levels)` takes four values of 0..99 each; `getsample()`
  advances one block and returns the pitch offset in Q24 per octave;
  `keydown(down)` presses or releases.
- `msfa.ringbuffer`: `RingBuffer`, a thread-safe 64 KiB byte FIFO
  between one producer and one consumer. `write(data)` blocks while the
  buffer is full; `read(size)` raises `ValueError` if fewer than `size`
  bytes are available.
- `msfa.wavout`: `WavOut(path, sample_rate, n_samples)`, a writer for
  16-bit mono WAV files. `write_data(samples)` converts Q24 samples with
  clipping and simple dither. It works as a context manager.
- `msfa.resofilter`: `ResoFilter(freqlut)`, a four-pole resonant ladder
  filter. `process(inbuf, control_in, control_last)` filters one
  64-sample block using the controls (log2 cutoff, resonance,
  overdrive; all Q24) from `control_in`. `make_state_transition(f0, k)`
  and `compute_alpha(freqlut, logf)` are the helpers it uses.

## Example

```python
import math

from msfa import fm_op_kernel
from msfa.freqlut import FreqLut
from msfa.wavout import WavOut

sample_rate = 44100.0
lut = FreqLut(sample_rate)
freq = lut.lookup(int(math.log2(440.0) * (1 << 24)))  # 440 Hz

blocks = 100
with WavOut("tone.wav", sample_rate, blocks * 64) as wav:
    phase = 0
    for _ in range(blocks):
        block = fm_op_kernel.compute_pure(phase, freq, 1 << 23, 1 << 23)
        wav.write_data(block)
        phase = (phase + freq * 64) & 0xFFFFFF
```

## What the package does not do

These are parts, not a playable instrument. There is no complete voice
combining operators into algorithms, no amplitude envelope, no MIDI
message handling or voice allocation, no sound-device output and no
command-line program. Rendering audio means driving the kernels
yourself and writing the result with `WavOut`.

## Tests

```
pip install -e .[test]
pytest
```