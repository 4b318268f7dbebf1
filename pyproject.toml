[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "wordloop"
version = "0.1.0"
description = "Arrange Russian words into a closed chain where each word starts with the last letter of the previous one"
requires-python = ">=3.10"
dependencies = []
keywords = ["words", "chain", "puzzle", "russian", "linked-list"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Natural Language :: Russian",
    "Environment :: Console",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordloop = "wordloop.cli:main"

[tool.setuptools]
packages = ["wordloop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
