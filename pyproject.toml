[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sigblocks"
version = "0.1.0"
description = "Sample-by-sample audio building blocks: envelopes, ramps, dynamics and effects"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "synthesis", "envelope", "reverb", "compressor", "effects"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sigblocks"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
