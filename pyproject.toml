[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sasa"
version = "0.1.0"
description = "Audio spectrum analysis: windowed FFT, logarithmic frequency bins and a terminal bar display"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["audio", "spectrum", "fft", "analyzer", "visualization"]
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
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sasa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
