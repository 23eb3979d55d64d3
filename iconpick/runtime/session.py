"""Session controller: applies input events to ``SessionState``.

All transitions happen synchronously here. Requeries go through the injected
candidate source; malformed queries and retrieval failures become toast
messages instead of ending the session.
"""

from __future__ import annotations

import logging

from ..errors import QueryParseError, RetrievalError
from ..grid import compute_grid, truncate_results
from ..icons.source import CandidateSource, split_search_string
from ..input.keys import (
    BrowseKeyActions,
    SearchKeyActions,
    build_browse_registry,
    build_search_registry,
    handle_search_key,
)
from ..ui_theme import DEFAULT_THEME, UITheme
from .navigation import Direction, move_selection
from .state import Mode, SessionState

logger = logging.getLogger(__name__)

NO_MATCHES_MESSAGE = "No icons matching search string."


class SessionController:
    def __init__(self, state: SessionState, source: CandidateSource, theme: UITheme = DEFAULT_THEME) -> None:
        self.state = state
        self.source = source
        self.theme = theme
        self._search_actions = SearchKeyActions(
            commit_search=self.commit_search,
            cancel_search=self.cancel_search,
            delete_char=self.delete_char,
            append_char=self.append_char,
            quit=self.quit,
        )
        self._browse_registry = build_browse_registry(
            BrowseKeyActions(
                move=self.move,
                commit_selection=self.commit_selection,
                start_search=self.start_search,
                narrow_to_prefix=self.narrow_to_prefix,
                quit=self.quit,
            )
        )
        self._search_registry = build_search_registry(self._search_actions)

    # Result set management

    def set_matches(self, matches: list[str]) -> None:
        """Replace the result list and reset selection for a full redraw."""
        state = self.state
        state.matches = list(matches)
        state.results = truncate_results(state.matches, state.geometry)
        state.nav.reset_selection()
        state.generation += 1

    def load_initial(self, query: str | None, prefix: str | None) -> None:
        """Populate the first result set; retrieval errors propagate."""
        found = self.source.retrieve(query, prefix)
        self.state.search.committed_prefix = prefix
        self.state.search.committed_query = query or ""
        self.set_matches(found)

    def _requery(self, prefix: str | None, query: str) -> list[str] | None:
        """Run a search, reporting failures as messages.

        Returns ``None`` on failure. A malformed query leaves the current
        results untouched; an unavailable source empties them.
        """
        try:
            found = self.source.retrieve(query, prefix)
        except QueryParseError as exc:
            logger.info("Rejected search %r: %s", query, exc)
            self.state.messages.push(f"Invalid search: {exc}", self.theme.message_error)
            return None
        except RetrievalError as exc:
            logger.warning("Search failed: %s", exc)
            self.set_matches([])
            self.state.messages.push(f"Search failed: {exc}", self.theme.message_warning)
            return None
        logger.info("Search prefix=%r query=%r matched %d icons", prefix, query, len(found))
        return found

    def handle_resize(self, columns: int, rows: int) -> None:
        state = self.state
        state.geometry = compute_grid(columns, rows)
        state.results = truncate_results(state.matches, state.geometry)
        state.nav.reset_selection()
        state.generation += 1

    # Browsing mode

    def move(self, direction: Direction) -> bool:
        state = self.state
        return move_selection(state.nav, direction, len(state.results), state.geometry.items_per_row)

    def commit_selection(self) -> None:
        candidate = self.state.selected_candidate
        if candidate is None:
            return
        self.state.selection = candidate
        self.state.quit = True

    def start_search(self) -> None:
        self.state.nav.mode = Mode.SEARCHING

    def narrow_to_prefix(self) -> None:
        """Restrict results to the selected icon's collection right away."""
        candidate = self.state.selected_candidate
        if candidate is None:
            return
        prefix, sep, _name = candidate.partition(":")
        if not sep or not prefix:
            return
        found = self._requery(prefix, "")
        if found is None:
            return
        if not found:
            self.state.messages.push(NO_MATCHES_MESSAGE, self.theme.message_warning)
            return
        search = self.state.search
        search.buffer = f"{prefix}:"
        search.committed_prefix = prefix
        search.committed_query = ""
        self.set_matches(found)

    def quit(self) -> None:
        self.state.selection = None
        self.state.quit = True

    # Searching mode

    def commit_search(self) -> None:
        """Run the buffered search; stay in search mode unless it found icons."""
        prefix, query = split_search_string(self.state.search.buffer)
        found = self._requery(prefix, query)
        if found is None:
            return
        if not found:
            self.state.messages.push(NO_MATCHES_MESSAGE, self.theme.message_warning)
            return
        search = self.state.search
        search.committed_prefix = prefix
        search.committed_query = query
        self.set_matches(found)
        self.state.nav.mode = Mode.BROWSING

    def cancel_search(self) -> None:
        self.state.nav.mode = Mode.BROWSING

    def delete_char(self) -> None:
        self.state.search.buffer = self.state.search.buffer[:-1]

    def append_char(self, ch: str) -> None:
        self.state.search.buffer += ch

    # Dispatch

    def handle_key(self, key: str) -> bool:
        """Apply one key token and return whether it was consumed."""
        state = self.state
        if state.skip_next_lf and key == "ENTER_LF":
            state.skip_next_lf = False
            return True
        state.skip_next_lf = key == "ENTER_CR"
        if key in {"ENTER_CR", "ENTER_LF"}:
            key = "ENTER"

        if state.nav.mode is Mode.SEARCHING:
            return handle_search_key(key, self._search_registry, self._search_actions)
        if not self._browse_registry.handles(key):
            return False
        self._browse_registry.dispatch(key)
        return True
