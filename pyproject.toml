[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "castlequest"
version = "0.1.0"
description = "A small console text adventure: find the princess in the castle before you meet the monster."
requires-python = ">=3.10"
dependencies = []
keywords = ["text adventure", "game", "interactive fiction", "castle", "procedural map"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
castlequest = "castlequest.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["castlequest"]

[tool.pytest.ini_options]
addopts = "-ra"
