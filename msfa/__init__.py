"""Fixed-point building blocks for a DX7-style FM synthesizer."""

__version__ = "0.1.0"