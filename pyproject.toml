[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "limbo"
version = "0.1.0"
description = "Tokenizer, parser and interpreter for Limbo, a small scripting language with variables, scopes, conditionals and a single output statement"
requires-python = ">=3.10"
keywords = ["interpreter", "scripting-language", "tokenizer", "parser", "toy-language"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Software Development :: Interpreters",
]
dependencies = [
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
limbo = "limbo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["limbo"]

[tool.hatch.build.targets.sdist]
include = ["limbo", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
