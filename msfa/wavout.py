"""Writer for mono 16-bit PCM WAV files from Q24 samples."""

import os
import struct

_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")


class WavOut:
    """A WAV file whose length is fixed when it is opened."""

    def __init__(self, path: str | os.PathLike, sample_rate: float, n_samples: int) -> None:
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        if n_samples < 0:
            raise ValueError("sample count must not be negative")
        rate = int(sample_rate)
        self._file = open(path, "wb")
        self._file.write(
            _HEADER.pack(
                b"RIFF",
                (36 + 2 * n_samples) & 0xFFFFFFFF,
                b"WAVE",
                b"fmt ",
                16,
                1,  # PCM
                1,  # mono
                rate & 0xFFFFFFFF,
                (2 * rate) & 0xFFFFFFFF,
                2,  # block align
                16,  # bits per sample
                b"data",
                (2 * n_samples) & 0xFFFFFFFF,
            )
        )

    def write_data(self, samples) -> None:
        """Write Q24 samples as 16-bit values, clipped, with simple dither."""
        delta = 0x100
        out = bytearray()
        for val in samples:
            if val < -(1 << 24):
                clip_val = -0x8000
            elif val >= 1 << 24:
                clip_val = 0x7FFF
            else:
                clip_val = (val + delta) >> 9
            delta = (delta + val) & 0x1FF
            out += struct.pack("<H", clip_val & 0xFFFF)
        self._file.write(out)

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "WavOut":
        return self

    def __exit__(self, *args) -> None:
        self.close()