[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "rushmatch"
version = "1.0.0"
description = "Identify which of the five rush box styles a text rectangle was drawn in"
requires-python = ">=3.10"
dependencies = []
keywords = ["ascii-art", "rectangle", "pattern", "puzzle"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
rushmatch = "rushmatch.cli:main"

[tool.setuptools.packages.find]
include = ["rushmatch*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
