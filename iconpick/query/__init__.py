"""Boolean search query language: tokenizer, parser, and matcher."""

from __future__ import annotations

from ..errors import QueryParseError
from .matcher import filter_candidates, matches
from .parser import And, Group, Not, Or, Phrase, Symbol, compile_query, parse, parse_tokens
from .tokenizer import tokenize

__all__ = [
    "And",
    "Group",
    "Not",
    "Or",
    "Phrase",
    "QueryParseError",
    "Symbol",
    "compile_query",
    "filter_candidates",
    "matches",
    "parse",
    "parse_tokens",
    "tokenize",
]
