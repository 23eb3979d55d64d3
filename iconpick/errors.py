"""Exception types shared across the query, icon-cache, and runtime layers.

Every error raised on purpose by iconpick derives from ``IconPickError`` so the
CLI can turn it into a clean exit message after terminal state is restored.
"""

from __future__ import annotations


class IconPickError(Exception):
    """Base class for expected, user-facing failures."""


class QueryParseError(IconPickError):
    """Malformed boolean search query.

    ``position`` is the token index where parsing stopped, or ``None`` when the
    query was empty.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at token {self.position})"


class RetrievalError(IconPickError):
    """Candidate corpus could not be loaded from the local cache."""


class IconNotFoundError(IconPickError):
    """Identifier has no entry in its cached collection."""
