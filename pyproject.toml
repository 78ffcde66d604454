[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xmidictrl"
version = "0.1.0"
description = "Building blocks for mapping MIDI controller messages to flight simulator commands and datarefs"
requires-python = ">=3.11"
dependencies = []
keywords = ["midi", "controller", "mapping", "flight-simulator", "toml"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xmidictrl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
