[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minicsem"
version = "0.1.0"
description = "Symbols, scoped symbol tables, token classification, rule logging and type rules for a small C subset"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "compiler",
    "symbol table",
    "scope",
    "tokens",
    "grammar rules",
    "type checking",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[tool.hatch.build.targets.wheel]
packages = ["minicsem"]

[tool.pytest.ini_options]
addopts = "-ra"
