"""Split raw search strings into operator and phrase tokens."""

from __future__ import annotations

OPERATOR_CHARS = frozenset("!&|()")


def tokenize(text: str) -> list[str]:
    """Return tokens for ``text``.

    Operators ``! & | ( )`` are emitted one character at a time. Runs of other
    non-whitespace characters form a single phrase token; whitespace only
    separates tokens and is never emitted.
    """
    tokens: list[str] = []
    phrase_start: int | None = None
    for idx, ch in enumerate(text):
        if ch in OPERATOR_CHARS or ch.isspace():
            if phrase_start is not None:
                tokens.append(text[phrase_start:idx])
                phrase_start = None
            if ch in OPERATOR_CHARS:
                tokens.append(ch)
        elif phrase_start is None:
            phrase_start = idx
    if phrase_start is not None:
        tokens.append(text[phrase_start:])
    return tokens
