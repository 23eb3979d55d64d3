"""Recursive-descent parser for boolean icon search queries.

Grammar::

    expression := primary ((("&" | "|")? primary))*
    primary    := "(" expression ")" | "!" primary | PHRASE

``&`` and plain adjacency both mean AND; ``|`` means OR. AND and OR share one
precedence level and fold left to right in the order written, so
``a | b & c`` parses as ``(a | b) & c``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..errors import QueryParseError
from .tokenizer import OPERATOR_CHARS, tokenize


@dataclass(frozen=True)
class Phrase:
    text: str


@dataclass(frozen=True)
class Group:
    """Parenthesized sub-expression; true only when every child matches.

    The parser always produces exactly one child.
    """

    children: tuple["Symbol", ...]


@dataclass(frozen=True)
class And:
    left: "Symbol"
    right: "Symbol"


@dataclass(frozen=True)
class Or:
    left: "Symbol"
    right: "Symbol"


@dataclass(frozen=True)
class Not:
    inner: "Symbol"


Symbol = Union[Phrase, Group, And, Or, Not]

_BINARY_OPERATORS = {"&", "|"}
MAX_NESTING_DEPTH = 64


def _starts_primary(token: str) -> bool:
    return token == "(" or token == "!" or token not in OPERATOR_CHARS


class _TokenStream:
    def __init__(self, tokens: list[str]) -> None:
        self.tokens = tokens
        self.pos = 0
        self.depth = 0

    def peek(self) -> str | None:
        if self.pos >= len(self.tokens):
            return None
        return self.tokens[self.pos]

    def take(self) -> str:
        token = self.tokens[self.pos]
        self.pos += 1
        return token


def _parse_expression(stream: _TokenStream) -> Symbol:
    left = _parse_primary(stream)
    while True:
        token = stream.peek()
        if token is None or token == ")":
            return left
        if token in _BINARY_OPERATORS:
            stream.take()
            if stream.peek() is None:
                raise QueryParseError(f"expected a term after {token!r}", stream.pos)
            right = _parse_primary(stream)
            left = Or(left, right) if token == "|" else And(left, right)
        elif _starts_primary(token):
            left = And(left, _parse_primary(stream))
        else:
            raise QueryParseError(f"unexpected {token!r}", stream.pos)


def _parse_primary(stream: _TokenStream) -> Symbol:
    token = stream.peek()
    if token is None:
        raise QueryParseError("unexpected end of query", stream.pos)
    if token in {"(", "!"}:
        if stream.depth >= MAX_NESTING_DEPTH:
            raise QueryParseError("query nested too deeply", stream.pos)
        stream.depth += 1
        try:
            return _parse_nested(stream, token)
        finally:
            stream.depth -= 1
    if token in OPERATOR_CHARS:
        raise QueryParseError(f"unexpected {token!r}", stream.pos)
    stream.take()
    return Phrase(token)


def _parse_nested(stream: _TokenStream, token: str) -> Symbol:
    if token == "(":
        stream.take()
        if stream.peek() == ")":
            raise QueryParseError("empty parentheses", stream.pos)
        if stream.peek() is None:
            raise QueryParseError("missing ')'", stream.pos)
        inner = _parse_expression(stream)
        if stream.peek() != ")":
            raise QueryParseError("missing ')'", stream.pos)
        stream.take()
        return Group((inner,))
    stream.take()
    if stream.peek() is None:
        raise QueryParseError("expected a term after '!'", stream.pos)
    return Not(_parse_primary(stream))


def parse_tokens(tokens: list[str]) -> Symbol:
    """Build a ``Symbol`` tree from already tokenized input.

    Raises ``QueryParseError`` for empty input, unbalanced parentheses,
    operators missing an operand, and nesting deeper than
    ``MAX_NESTING_DEPTH``.
    """
    if not tokens:
        raise QueryParseError("empty query")
    stream = _TokenStream(tokens)
    tree = _parse_expression(stream)
    if stream.peek() is not None:
        raise QueryParseError(f"unmatched {stream.peek()!r}", stream.pos)
    return tree


def parse(text: str) -> Symbol:
    """Tokenize and parse ``text`` into a query tree."""
    return parse_tokens(tokenize(text))


def compile_query(text: str | None) -> Symbol | None:
    """Parse ``text`` unless blank; ``None`` means "match every candidate"."""
    if text is None or not text.strip():
        return None
    return parse(text)
