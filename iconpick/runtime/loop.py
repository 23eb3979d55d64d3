"""Main interactive event loop for the icon browser.

Each iteration handles at most one event (a resize or a key), redraws, and
sleeps briefly. Feature logic lives in ``SessionController``.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from ..input import read_key
from ..render import FrameRenderer
from ..terminal import terminal_size
from .session import SessionController


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    input_timeout_ms: int = 500
    frame_interval_seconds: float = 0.033


def run_main_loop(
    controller: SessionController,
    renderer: FrameRenderer,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    *,
    get_terminal_size: Callable[[], tuple[int, int]] = terminal_size,
    read: Callable[..., str] = read_key,
    sleep: Callable[[float], None] = time.sleep,
) -> str | None:
    """Run until the user commits a selection or quits; return the selection.

    A terminal size change is treated as that frame's event, so resize and key
    handling never share an iteration.
    """
    state = controller.state
    renderer.draw(state)
    while not state.quit:
        columns, rows = get_terminal_size()
        if (columns, rows) != (state.geometry.columns, state.geometry.rows):
            controller.handle_resize(columns, rows)
        else:
            key = read(stdin_fd, timeout_ms=timing.input_timeout_ms)
            if key:
                controller.handle_key(key)
        if state.quit:
            break
        renderer.draw(state)
        sleep(timing.frame_interval_seconds)
    return state.selection
