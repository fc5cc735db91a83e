[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "olympiad"
version = "0.1.0"
description = "Solutions, checkers and simulators for a set of programming olympiad tasks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "olympiad",
    "competitive-programming",
    "algorithms",
    "dynamic-programming",
    "number-theory",
    "checker",
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
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
olympiad-removal = "olympiad.removal:main"
olympiad-sum-pair = "olympiad.sum_pair:main"
olympiad-robot-fights = "olympiad.robot_fights:main"
olympiad-stairs = "olympiad.stairs:main"
olympiad-fair-division = "olympiad.fair_division:main"
olympiad-fair-division-check = "olympiad.fair_division:checker_main"
olympiad-bitada = "olympiad.bitada:main"
olympiad-cyclic-lock = "olympiad.cyclic_lock:main"
olympiad-lock-generator = "olympiad.lock_generator:main"
olympiad-casino = "olympiad.casino_strategies:main"

[tool.hatch.build.targets.wheel]
packages = ["olympiad"]

[tool.hatch.build.targets.sdist]
include = ["olympiad", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
