"""Grid layout for the icon browser.

Each result occupies a fixed ``CELL_WIDTH`` x ``CELL_HEIGHT`` block. The grid
starts at ``(GRID_TOP, GRID_LEFT)`` in 1-based terminal coordinates and leaves
``RESERVED_ROWS`` at the bottom for the debug overlay, toast, and status line.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

CELL_WIDTH = 8
CELL_HEIGHT = 4
GRID_MARGIN = 4
RESERVED_ROWS = 6
GRID_LEFT = 3
GRID_TOP = 2


@dataclass(frozen=True)
class GridGeometry:
    columns: int
    rows: int
    items_per_row: int
    visible_rows: int

    @property
    def visible_capacity(self) -> int:
        return self.visible_rows * self.items_per_row


def compute_grid(columns: int, rows: int) -> GridGeometry:
    """Derive grid geometry from terminal size.

    ``items_per_row`` never drops below one so index arithmetic stays defined on
    very narrow terminals; a too-short terminal yields zero visible rows.
    """
    items_per_row = max(1, (columns - GRID_MARGIN) // CELL_WIDTH)
    visible_rows = max(0, (rows - RESERVED_ROWS) // CELL_HEIGHT)
    return GridGeometry(columns=columns, rows=rows, items_per_row=items_per_row, visible_rows=visible_rows)


def truncate_results(results: Sequence[str], geometry: GridGeometry) -> list[str]:
    """Keep the first ``min(len(results), visible_capacity)`` results in order."""
    return list(results[: geometry.visible_capacity])


def cell_position(index: int, geometry: GridGeometry) -> tuple[int, int]:
    """Return ``(row, col)`` grid coordinates of result ``index``."""
    return divmod(index, geometry.items_per_row)


def cell_origin(index: int, geometry: GridGeometry) -> tuple[int, int]:
    """Return the 1-based terminal ``(x, y)`` of the top-left corner of a cell."""
    row, col = cell_position(index, geometry)
    return GRID_LEFT + col * CELL_WIDTH, GRID_TOP + row * CELL_HEIGHT
