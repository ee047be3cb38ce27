"""Tokenizer, parser and interpreter for the Limbo scripting language."""

__version__ = "0.1.0"

__all__ = [
    "ast",
    "cli",
    "environment",
    "errors",
    "interpreter",
    "location",
    "parser",
    "tokenizer",
    "tokens",
    "values",
]