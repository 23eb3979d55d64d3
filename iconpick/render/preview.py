"""Text previews drawn inside grid cells.

Cells show the icon name wrapped over two lines with the collection prefix
underneath, since bitmap rendering of icons is handled by other tools.
"""

from __future__ import annotations

from typing import Protocol

from ..grid import CELL_HEIGHT, CELL_WIDTH
from ..ui_theme import DEFAULT_THEME, UITheme

PREVIEW_WIDTH = CELL_WIDTH - 2
PREVIEW_HEIGHT = CELL_HEIGHT - 1


class PreviewRenderer(Protocol):
    def render(self, candidate: str, origin: tuple[int, int], highlighted: bool) -> str:
        ...


def preview_lines(candidate: str, width: int = PREVIEW_WIDTH) -> list[str]:
    """Split ``prefix:name`` into ``PREVIEW_HEIGHT`` fixed-width label rows."""
    prefix, sep, name = candidate.partition(":")
    if not sep:
        prefix, name = "", candidate
    rows = [name[:width], name[width : width * 2], prefix[:width]]
    if len(name) > width * 2:
        rows[1] = rows[1][:-1] + "~"
    return [row.ljust(width) for row in rows]


class TextPreviewRenderer:
    def __init__(self, theme: UITheme = DEFAULT_THEME) -> None:
        self.theme = theme

    def render(self, candidate: str, origin: tuple[int, int], highlighted: bool) -> str:
        """Return escape sequences drawing ``candidate`` with its top-left at ``origin``."""
        x, y = origin
        theme = self.theme
        out: list[str] = []
        for offset, row in enumerate(preview_lines(candidate)):
            if highlighted:
                style = theme.selection
            elif offset == PREVIEW_HEIGHT - 1:
                style = theme.label_prefix
            else:
                style = theme.label
            out.append(f"\x1b[{y + offset};{x}H{style}{row}{theme.reset}")
        return "".join(out)
