"""Recursive-descent parser that builds a syntax tree from tokens."""

from __future__ import annotations

from typing import Sequence

from nasmlang.tokenizer import Token, is_keyword
from nasmlang.tree import Node, NodeType

_COMPARISONS = (">", "<", "==", ">=", "<=", "!=")
_MATH_FUNCTIONS = ("sqrt", "sin", "cos")


class ParseError(ValueError):
    """Raised when the token stream does not follow the grammar."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"syntax error at token {position}: {message}")
        self.position = position


def _op(value: str, left: Node | None = None, right: Node | None = None) -> Node:
    return Node(NodeType.OPERATION, value, left, right)


class Parser:
    """Parser for one token sequence; ``parse`` returns the tree root."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = list(tokens)
        self._pos = 0

    def parse(self) -> Node:
        """Parse the whole program, which must finish with ``end``."""
        self._pos = 0
        root = self._definition()
        self._expect(";")
        while self._peek() != "end":
            statement = self._definition()
            self._expect(";")
            root = _op(";", root, statement)
        return root

    # token access ------------------------------------------------------

    def _token(self) -> Token:
        if self._pos >= len(self.tokens):
            raise ParseError("unexpected end of input", self._pos)
        return self.tokens[self._pos]

    def _peek(self) -> str:
        return self._token().value

    def _advance(self) -> str:
        value = self._peek()
        self._pos += 1
        return value

    def _expect(self, value: str) -> None:
        found = self._peek()
        if found != value:
            raise ParseError(f"expected {value!r}, found {found!r}", self._pos)
        self._pos += 1

    def _error(self, message: str) -> ParseError:
        return ParseError(message, self._pos)

    # grammar -----------------------------------------------------------

    def _comparison(self) -> Node:
        left = self._expression()
        if self._peek() in _COMPARISONS:
            operator = self._advance()
            left = _op(operator, left, self._expression())
        return left

    def _expression(self) -> Node:
        left = self._multiplication()
        while self._peek() in ("+", "-"):
            operator = self._advance()
            left = _op(operator, left, self._multiplication())
        return left

    def _multiplication(self) -> Node:
        left = self._primary()
        while self._peek() in ("*", "/"):
            operator = self._advance()
            left = _op(operator, left, self._primary())
        return left

    def _primary(self) -> Node:
        if self._peek() == "(":
            self._pos += 1
            node = self._comparison()
            self._expect(")")
            return node
        kind = self._token().type
        if kind is NodeType.IDENTIFIER:
            return self._variable()
        if kind is NodeType.NUMBER:
            return Node(NodeType.NUMBER, self._advance())
        if kind is NodeType.OPERATION:
            return self._math_function()
        raise self._error(f"unexpected {self._peek()!r} in expression")

    def _math_function(self) -> Node:
        name = self._peek()
        if name not in _MATH_FUNCTIONS:
            raise self._error(f"unexpected {name!r} in expression")
        self._pos += 1
        self._expect("(")
        argument = self._comparison()
        self._expect(")")
        return _op(name, argument)

    def _variable(self) -> Node:
        return Node(NodeType.IDENTIFIER, self._advance())

    def _definition(self) -> Node:
        if self._peek() != "def":
            return self._statement()
        self._pos += 1
        name = self._advance()
        self._expect("(")
        params = self._variable()
        last = params
        while self._peek() == ";":
            self._pos += 1
            last.left = self._variable()
            last = last.left
        self._expect(")")
        body = self._statement()
        return Node(NodeType.FUNCTION, name, params, body)

    def _statement(self) -> Node:
        word = self._peek()
        if word in ("if", "while"):
            self._pos += 1
            self._expect("(")
            condition = self._comparison()
            self._expect(")")
            return _op(word, condition, self._statement())
        if word == "print":
            self._pos += 1
            self._expect("(")
            argument = self._comparison()
            self._expect(")")
            return _op("print", argument)
        if word == "return":
            self._pos += 1
            return _op("return", self._comparison())
        if word == "{":
            self._pos += 1
            block = self._statement()
            self._expect(";")
            while self._peek() != "}":
                statement = self._statement()
                self._expect(";")
                block = _op(";", block, statement)
            self._expect("}")
            return block
        if not is_keyword(word):
            return self._assignment()
        raise self._error(f"unexpected {word!r} at start of statement")

    def _assignment(self) -> Node:
        target = self._variable()
        self._expect("=")
        if self._peek() == "call":
            self._pos += 1
            name = self._advance()
            self._expect("(")
            args = self._variable()
            while self._peek() == ";":
                self._pos += 1
                args = Node(NodeType.IDENTIFIER, self._advance(), args)
            self._expect(")")
            value = Node(NodeType.CALLING, name, args)
        else:
            value = self._comparison()
        return _op("=", target, value)


def parse(tokens: Sequence[Token]) -> Node:
    """Parse a token sequence into a syntax tree."""
    return Parser(tokens).parse()