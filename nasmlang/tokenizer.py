"""Splitting program text into typed tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from nasmlang.tree import NodeType

DEFAULT_SOURCE_FILE = "code.txt"

KEYWORDS = frozenset(
    {
        "if", "def", "+", "-", "*", "/", "end", "sin", "cos", "call", "sqrt",
        "<", "while", "print", "return", ">", ";", "==", "<=", "!=", ">=",
        "(", ")", "{", "}",
    }
)

_SEPARATORS = re.compile(r"[ \n]+")
_ASCII_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Token:
    """A word of the program with its kind."""

    type: NodeType
    value: str


def is_keyword(word: str) -> bool:
    """Tell whether ``word`` is a reserved word or symbol of the language."""
    return word in KEYWORDS


def _classify(word: str) -> NodeType:
    if word == "def":
        return NodeType.FUNCTION
    if is_keyword(word):
        return NodeType.OPERATION
    if word[0] in _ASCII_DIGITS:
        return NodeType.NUMBER
    return NodeType.IDENTIFIER


def tokenize(text: str) -> list[Token]:
    """Split text on spaces and newlines and classify each word."""
    return [Token(_classify(word), word) for word in _SEPARATORS.split(text) if word]


def tokenize_file(path=DEFAULT_SOURCE_FILE) -> list[Token]:
    """Read a program file and tokenize its contents."""
    return tokenize(Path(path).read_text(encoding="utf-8"))