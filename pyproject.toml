[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "msfa"
version = "0.1.0"
description = "Fixed-point building blocks for a DX7-style FM synthesizer: sine and log tables, FM operator kernels, LFO, pitch envelope, resonant filter, ring buffer and WAV output"
requires-python = ">=3.10"
dependencies = []
keywords = ["synthesizer", "fm", "dx7", "audio", "dsp", "fixed-point"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["msfa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
