"""Grid rendering: dirty-region planning, frame output, and cell previews."""

from __future__ import annotations

from .frame import FrameRenderer, clear_cell
from .planner import FramePlan, FrameSnapshot, plan_frame
from .preview import PreviewRenderer, TextPreviewRenderer, preview_lines

__all__ = [
    "FramePlan",
    "FrameRenderer",
    "FrameSnapshot",
    "PreviewRenderer",
    "TextPreviewRenderer",
    "clear_cell",
    "plan_frame",
    "preview_lines",
]
