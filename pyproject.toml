[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventsolve"
version = "0.1.0"
description = "Solvers for nine daily programming puzzles: list distances, reports, memory scans, word grids, page orderings, patrols, equations, antennas and disk maps."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "grid", "command-line"]
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
adventsolve-day01 = "adventsolve.day01:main"
adventsolve-day02 = "adventsolve.day02:main"
adventsolve-day03 = "adventsolve.day03:main"
adventsolve-day04 = "adventsolve.day04:main"
adventsolve-day05 = "adventsolve.day05:main"
adventsolve-day05v2 = "adventsolve.day05v2:main"
adventsolve-day06 = "adventsolve.day06:main"
adventsolve-day07 = "adventsolve.day07:main"
adventsolve-day08 = "adventsolve.day08:main"
adventsolve-day09 = "adventsolve.day09:main"

[tool.hatch.build.targets.wheel]
packages = ["adventsolve"]

[tool.hatch.build.targets.sdist]
include = ["adventsolve", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["adventsolve"]
