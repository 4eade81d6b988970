[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labworks"
version = "1.0.0"
description = "A packed RNA chain, a typed CSV reader, Conway's Game of Life and a robot-exploration console game"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "rna",
    "bit-packing",
    "csv",
    "game-of-life",
    "cellular-automaton",
    "robots",
    "pathfinding",
    "a-star",
    "dijkstra",
    "console-game",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labworks-csv = "labworks.csvparser.reader:main"
labworks-life = "labworks.life.console:main"
labworks-robots = "labworks.robots.game:main"

[tool.hatch.build.targets.wheel]
packages = ["labworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
