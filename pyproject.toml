[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treasurehunt"
version = "1.0.0"
description = "A tile-based treasure hunt: collect every coin, then reach the chest"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tile", "maze", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
treasurehunt = "treasurehunt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["treasurehunt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
