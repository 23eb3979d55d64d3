"""Directional selection moves over the result grid.

Moves work in index space and clamp at the edges; there is no wraparound.
"""

from __future__ import annotations

from enum import Enum

from .state import NavState


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def _target_index(direction: Direction, selected: int, result_count: int, items_per_row: int) -> int | None:
    if direction is Direction.UP:
        if selected + 1 > items_per_row:
            return selected - items_per_row
        return None
    if direction is Direction.DOWN:
        if selected + items_per_row <= result_count - 1:
            return selected + items_per_row
        return None
    if direction is Direction.LEFT:
        return selected - 1 if selected > 0 else None
    if direction is Direction.RIGHT:
        return selected + 1 if selected < result_count - 1 else None
    raise ValueError(f"unknown direction: {direction!r}")


def move_selection(nav: NavState, direction: Direction, result_count: int, items_per_row: int) -> bool:
    """Move the selection one step and return whether it changed.

    ``Down`` only moves when a result exists directly below, so short last rows
    are never overshot. A successful move records the prior index in
    ``previous_selected_index``; a blocked move leaves both fields untouched.
    """
    if result_count <= 0 or items_per_row <= 0:
        return False
    target = _target_index(direction, nav.selected_index, result_count, items_per_row)
    if target is None:
        return False
    nav.previous_selected_index = nav.selected_index
    nav.selected_index = target
    return True
