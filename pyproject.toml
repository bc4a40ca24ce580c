[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent24"
version = "0.1.0"
description = "Solutions to a series of daily programming puzzles, one module per day"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solutions", "algorithms"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent24 = "advent24.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["advent24"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
