[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2022"
version = "1.0.0"
description = "Solvers for the 2022 Advent of Code puzzles, days 1 to 12"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "2022"]
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
aoc2022-day01 = "aoc2022.day01:main"
aoc2022-day02 = "aoc2022.day02:main"
aoc2022-day03 = "aoc2022.day03:main"
aoc2022-day04 = "aoc2022.day04:main"
aoc2022-day05 = "aoc2022.day05:main"
aoc2022-day06 = "aoc2022.day06:main"
aoc2022-day07 = "aoc2022.day07:main"
aoc2022-day08 = "aoc2022.day08:main"
aoc2022-day09 = "aoc2022.day09:main"
aoc2022-day10 = "aoc2022.day10:main"
aoc2022-day11 = "aoc2022.day11:main"
aoc2022-day12 = "aoc2022.day12:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2022"]

[tool.pytest.ini_options]
addopts = "-ra"
