"""Candidate retrieval from the cached icon corpus."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from ..query import compile_query, filter_candidates
from .cache import DEFAULT_CACHE_DIR, load_icon_ids

logger = logging.getLogger(__name__)


class CandidateSource(Protocol):
    def retrieve(self, query: str | None, prefix: str | None) -> list[str]:
        ...


def split_search_string(search: str) -> tuple[str | None, str]:
    """Split a search buffer into ``(prefix, query)`` on the first colon.

    Without a colon there is no prefix and the whole buffer is the query.
    """
    prefix, sep, query = search.partition(":")
    if not sep:
        return None, search
    return prefix, query


def join_search_string(prefix: str | None, query: str | None) -> str:
    """Build the editable search buffer from start-up prefix/query values."""
    query = query or ""
    if not prefix:
        return query
    return f"{prefix}:{query}"


def filter_by_prefix(candidates: Sequence[str], prefix: str | None) -> list[str]:
    if not prefix:
        return list(candidates)
    marker = f"{prefix}:"
    return [candidate for candidate in candidates if candidate.startswith(marker)]


class CachedIconSource:
    """Serve ``prefix:name`` candidates from ``icons.txt`` under ``cache_dir``.

    The corpus is read on first use and reused for every later requery.
    """

    def __init__(self, cache_dir: Path | None = None) -> None:
        self.cache_dir = cache_dir if cache_dir is not None else DEFAULT_CACHE_DIR
        self._icon_ids: list[str] | None = None

    def icon_ids(self) -> list[str]:
        if self._icon_ids is None:
            self._icon_ids = load_icon_ids(self.cache_dir)
        return self._icon_ids

    def retrieve(self, query: str | None, prefix: str | None) -> list[str]:
        """Return candidates under ``prefix`` that match the boolean ``query``.

        Raises ``QueryParseError`` before touching the corpus when ``query`` is
        malformed, and ``RetrievalError`` when the cache is unavailable.
        """
        tree = compile_query(query)
        icon_ids = self.icon_ids()
        found = filter_candidates(tree, filter_by_prefix(icon_ids, prefix))
        logger.info("Searched %d icons, %d matched", len(icon_ids), len(found))
        return found
