[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lighten"
version = "0.1.0"
description = "Tokenizer and statement parser for the Lighten programming language (.lt source files)"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "tokenizer", "parser", "language", "lighten"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lighten = "lighten.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lighten"]

[tool.pytest.ini_options]
addopts = "-ra"
