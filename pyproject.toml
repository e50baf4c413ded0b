[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simsearch"
version = "0.2.5"
description = "A simple and lightweight in-memory fuzzy search engine for finding similar strings."
requires-python = ">=3.10"
dependencies = []
keywords = ["fuzzy", "search", "lightweight", "pattern", "similarity", "jaro-winkler", "levenshtein"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
simsearch-books = "simsearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["simsearch"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
