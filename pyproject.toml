[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gameframe"
version = "0.1.0"
description = "Building blocks for grid-based puzzle games: vector and matrix math, collision tests, easing curves, frame timing, resource caching, layered modes, animation and tile maps."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "framework", "collision", "easing", "vector", "quaternion", "tilemap", "puzzle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gameframe"]

[tool.pytest.ini_options]
addopts = "-ra"
