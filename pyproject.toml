[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pacgrid"
version = "0.1.0"
description = "A small terminal Pac-Man game on a 10x10 grid, with four ghosts, ghost states and a power pellet"
requires-python = ">=3.10"
dependencies = []
keywords = ["pacman", "game", "terminal", "arcade", "ghosts"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pacgrid = "pacgrid.game:main"

[tool.hatch.build.targets.wheel]
packages = ["pacgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
