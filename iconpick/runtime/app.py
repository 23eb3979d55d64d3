"""Runtime composition layer for the icon browser.

Builds the initial session state, wires the controller and renderer, and runs
the loop inside the terminal's raw-mode scope.
"""

from __future__ import annotations

import logging
import sys

from ..grid import compute_grid
from ..icons.source import CandidateSource, join_search_string
from ..render import FrameRenderer, TextPreviewRenderer
from ..terminal import TerminalController, terminal_size
from ..ui_theme import UITheme
from .loop import RuntimeLoopTiming, run_main_loop
from .messages import MessageQueue
from .session import SessionController
from .state import SearchState, SessionState

logger = logging.getLogger(__name__)


def build_session(
    source: CandidateSource,
    query: str | None,
    prefix: str | None,
    theme: UITheme,
    verbose: bool = False,
) -> SessionController:
    """Create a controller whose state holds the initial search results.

    Raises ``RetrievalError`` when the corpus cannot be loaded.
    """
    columns, rows = terminal_size()
    state = SessionState(
        geometry=compute_grid(columns, rows),
        search=SearchState(buffer=join_search_string(prefix, query)),
        messages=MessageQueue(),
        verbose=verbose,
    )
    controller = SessionController(state, source, theme)
    controller.load_initial(query, prefix)
    return controller


def run_browser(
    source: CandidateSource,
    query: str | None,
    prefix: str | None,
    theme: UITheme,
    verbose: bool = False,
    timing: RuntimeLoopTiming | None = None,
) -> str | None:
    """Browse icons interactively and return the committed identifier.

    Terminal state is restored on every exit path, including a failed initial
    retrieval.
    """
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    with terminal.raw_mode():
        controller = build_session(source, query, prefix, theme, verbose)
        renderer = FrameRenderer(preview=TextPreviewRenderer(theme), theme=theme)
        selection = run_main_loop(controller, renderer, stdin_fd, timing or RuntimeLoopTiming())
    logger.info("Session ended with selection %r", selection)
    return selection
