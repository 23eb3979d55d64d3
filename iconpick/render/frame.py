"""Frame assembly for the icon browser.

Grid cells are written according to a ``FramePlan``; the overlay, toast, and
status rows at the bottom are rewritten every frame. Everything for one frame
is emitted with a single write.
"""

from __future__ import annotations

import logging
import os
import sys
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..grid import CELL_HEIGHT, CELL_WIDTH, GridGeometry, cell_origin
from ..ui_theme import DEFAULT_THEME, UITheme
from .planner import FramePlan, plan_frame
from .preview import PreviewRenderer, TextPreviewRenderer

if TYPE_CHECKING:
    from ..runtime.state import SessionState

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J"
CLEAR_LINE = "\x1b[2K"
SEARCH_PROMPT = "Enter search: "
NO_RESULTS_TEXT = "No results found."


def _move(x: int, y: int) -> str:
    return f"\x1b[{y};{x}H"


def _write_stdout(text: str) -> None:
    os.write(sys.stdout.fileno(), text.encode("utf-8", errors="replace"))


def clear_cell(index: int, geometry: GridGeometry) -> str:
    """Blank the full ``CELL_HEIGHT`` x ``CELL_WIDTH`` block of one cell."""
    x, y = cell_origin(index, geometry)
    blank = " " * CELL_WIDTH
    return "".join(f"{_move(x, y + offset)}{blank}" for offset in range(CELL_HEIGHT))


def _line(y: int, text: str, style: str, theme: UITheme, columns: int) -> str:
    text = text[: max(0, columns - 1)]
    if not text:
        return f"{_move(1, y)}{CLEAR_LINE}"
    return f"{_move(1, y)}{CLEAR_LINE}{style}{text}{theme.reset}"


class FrameRenderer:
    """Turn session state into terminal output, repainting only dirty cells."""

    def __init__(
        self,
        preview: PreviewRenderer | None = None,
        theme: UITheme = DEFAULT_THEME,
        write: Callable[[str], None] = _write_stdout,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.preview = preview if preview is not None else TextPreviewRenderer(theme)
        self.theme = theme
        self.write = write
        self.clock = clock

    def _cell(self, candidate: str, index: int, geometry: GridGeometry, highlighted: bool) -> str:
        try:
            return self.preview.render(candidate, cell_origin(index, geometry), highlighted)
        except Exception:
            logger.exception("Preview failed for %s", candidate)
            return ""

    def grid_output(self, plan: FramePlan, state: SessionState) -> str:
        geometry = state.geometry
        results = state.results
        out: list[str] = []
        if plan.full_redraw:
            out.append(CLEAR_SCREEN)
            for index, candidate in enumerate(results):
                out.append(self._cell(candidate, index, geometry, index == plan.paint_index))
            return "".join(out)
        if plan.clear_index is not None and plan.clear_index < len(results):
            out.append(clear_cell(plan.clear_index, geometry))
            out.append(self._cell(results[plan.clear_index], plan.clear_index, geometry, False))
        if plan.paint_index is not None and plan.paint_index < len(results):
            out.append(self._cell(results[plan.paint_index], plan.paint_index, geometry, True))
        return "".join(out)

    def status_output(self, state: SessionState) -> str:
        """Rewrite the debug overlay, toast row, and status row."""
        from ..runtime.state import Mode

        theme = self.theme
        geometry = state.geometry
        columns, rows = geometry.columns, geometry.rows
        out: list[str] = []
        if state.verbose:
            overlay = (
                f"Index: {state.nav.selected_index}",
                f"Grid width: {columns}",
                f"Per row: {geometry.items_per_row}",
            )
            for offset, text in enumerate(overlay):
                out.append(_line(rows - 4 + offset, text, theme.overlay, theme, columns))

        message = state.messages.current(self.clock())
        if message is None:
            out.append(_line(rows - 1, "", "", theme, columns))
        else:
            out.append(_line(rows - 1, message.text, message.color, theme, columns))

        if state.nav.mode is Mode.SEARCHING:
            out.append(_line(rows, f"{SEARCH_PROMPT}{state.search.buffer}", theme.search_prompt, theme, columns))
        elif state.selected_candidate is not None:
            out.append(_line(rows, state.selected_candidate, theme.status, theme, columns))
        else:
            out.append(_line(rows, NO_RESULTS_TEXT, theme.status, theme, columns))
        return "".join(out)

    def draw(self, state: SessionState) -> FramePlan:
        """Render one frame and remember what was drawn for the next diff."""
        snapshot = state.frame_snapshot()
        plan = plan_frame(state.last_frame, snapshot)
        self.write(self.grid_output(plan, state) + self.status_output(state))
        state.last_frame = snapshot
        return plan
