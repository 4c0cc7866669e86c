[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "golemlab"
version = "0.4.35"
description = "Temple Golem, a small tile-based platformer with a map editor, plus a few small companion tools"
requires-python = ">=3.10"
keywords = ["game", "platformer", "pygame", "tile map", "level editor", "brainfuck", "svg", "clock", "linked list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
golemlab = "golemlab.app:main"
golemlab-bf = "golemlab.brainfuck:main"
golemlab-clock = "golemlab.clock:main"
golemlab-list = "golemlab.linkedlist:main"

[tool.hatch.build.targets.wheel]
packages = ["golemlab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
