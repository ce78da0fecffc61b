"""Tokenizer, parser and syntax-tree tools for a small imperative language."""

__version__ = "0.1.0"