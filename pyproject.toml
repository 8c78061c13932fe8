[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "piscine-rush"
version = "0.1.0"
description = "Three small puzzles: ASCII rectangles, a 4x4 skyscraper solver and numbers spelled out in words"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "skyscraper", "ascii-art", "number-to-words", "backtracking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rush-00 = "piscine_rush.rectangle:main"
rush-01 = "piscine_rush.skyscraper:main"
rush-02 = "piscine_rush.numwords:main"

[tool.hatch.build.targets.wheel]
packages = ["piscine_rush"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
