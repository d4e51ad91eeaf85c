[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlesolve"
version = "0.1.0"
description = "Solvers for daily programming puzzles: calories, rock paper scissors, calibration values, cube games, schematics, scratchcards and seed almanacs."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "programming-puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
puzzlesolve-2022-day01 = "puzzlesolve.y2022_day01:main"
puzzlesolve-2022-day02 = "puzzlesolve.y2022_day02:main"
puzzlesolve-2023-day01 = "puzzlesolve.y2023_day01:main"
puzzlesolve-2023-day02 = "puzzlesolve.y2023_day02:main"
puzzlesolve-2023-day03 = "puzzlesolve.y2023_day03:main"
puzzlesolve-2023-day04 = "puzzlesolve.y2023_day04:main"
puzzlesolve-2023-day05 = "puzzlesolve.y2023_day05:main"
puzzlesolve-2023-day06 = "puzzlesolve.y2023_day06:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlesolve"]

[tool.hatch.build.targets.sdist]
include = ["puzzlesolve", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
