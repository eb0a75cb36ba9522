[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "krtools"
version = "0.1.0"
description = "Small text tools: counting filters, power and temperature tables, longest line, keyword tallies, word trees, a symbol table, a mini printf, running sums and cat."
requires-python = ">=3.10"
dependencies = []
keywords = ["text", "word count", "keywords", "binary tree", "hash table", "cat", "filters"]
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
    "Topic :: Text Processing :: General",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kr-count = "krtools.counting:main"
kr-power = "krtools.power:main"
kr-temperature = "krtools.temperature:main"
kr-longest = "krtools.lines:main"
kr-keywords = "krtools.keywords:main"
kr-wordtree = "krtools.wordtree:main"
kr-symtab = "krtools.symtab:main"
kr-runsum = "krtools.runsum:main"
kr-cat = "krtools.cat:main"

[tool.hatch.build.targets.wheel]
packages = ["krtools"]

[tool.hatch.build.targets.sdist]
include = ["krtools", "tests", "pyproject.toml"]

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
files = ["krtools"]
