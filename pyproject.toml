[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "so_long"
version = "0.1.0"
description = "Map loader and validator for a small tile-based collect-and-exit game, with C-style string, memory, list and formatting helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "map", "flood-fill", "validation", "tiles"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
so_long = "so_long.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["so_long"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
