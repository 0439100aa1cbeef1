[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2017"
version = "1.0.0"
description = "Solutions to days 1 to 20 of the 2017 programming puzzle calendar, as a library and command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "knot-hash", "solutions", "algorithms"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
advent2017-day01 = "advent2017.day01:main"
advent2017-day02 = "advent2017.day02:main"
advent2017-day03 = "advent2017.day03:main"
advent2017-day04 = "advent2017.day04:main"
advent2017-day05 = "advent2017.day05:main"
advent2017-day06 = "advent2017.day06:main"
advent2017-day07 = "advent2017.day07:main"
advent2017-day08 = "advent2017.day08:main"
advent2017-day09 = "advent2017.day09:main"
advent2017-day10 = "advent2017.day10:main"
advent2017-day11 = "advent2017.day11:main"
advent2017-day12 = "advent2017.day12:main"
advent2017-day13 = "advent2017.day13:main"
advent2017-day14 = "advent2017.day14:main"
advent2017-day15 = "advent2017.day15:main"
advent2017-day16 = "advent2017.day16:main"
advent2017-day17 = "advent2017.day17:main"
advent2017-day18 = "advent2017.day18:main"
advent2017-day19 = "advent2017.day19:main"
advent2017-day20 = "advent2017.day20:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2017"]

[tool.hatch.build.targets.sdist]
include = ["advent2017", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
