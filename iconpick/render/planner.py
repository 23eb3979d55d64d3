"""Dirty-region planning for grid frames.

A frame is described by an immutable ``FrameSnapshot``. Comparing the snapshot
that was last drawn with the current one decides whether the whole grid has to
be repainted or only the old and new selection cells.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FrameSnapshot:
    """What the grid shows: result-set generation, layout, and selection."""

    generation: int
    items_per_row: int
    selected_index: int | None


@dataclass(frozen=True)
class FramePlan:
    full_redraw: bool
    clear_index: int | None
    paint_index: int | None


def plan_frame(previous: FrameSnapshot | None, current: FrameSnapshot) -> FramePlan:
    """Return the minimal set of cell operations turning ``previous`` into ``current``.

    A new result set or a relayout forces a full redraw. Otherwise at most one
    cell is cleared (the old selection) and one cell is highlighted.
    """
    if (
        previous is None
        or previous.generation != current.generation
        or previous.items_per_row != current.items_per_row
    ):
        return FramePlan(full_redraw=True, clear_index=None, paint_index=current.selected_index)
    clear_index = None
    if previous.selected_index is not None and previous.selected_index != current.selected_index:
        clear_index = previous.selected_index
    return FramePlan(full_redraw=False, clear_index=clear_index, paint_index=current.selected_index)
