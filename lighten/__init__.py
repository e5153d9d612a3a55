"""Tokenizer and statement parser for the Lighten programming language."""

__version__ = "0.1.0"