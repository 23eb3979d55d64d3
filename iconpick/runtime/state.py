"""Mutable session state threaded through every event-handling step."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..grid import GridGeometry
from ..render.planner import FrameSnapshot
from .messages import MessageQueue


class Mode(Enum):
    BROWSING = "browsing"
    SEARCHING = "searching"


@dataclass
class NavState:
    selected_index: int = 0
    previous_selected_index: int | None = None
    mode: Mode = Mode.BROWSING

    def reset_selection(self) -> None:
        self.selected_index = 0
        self.previous_selected_index = None


@dataclass
class SearchState:
    """Editable search buffer plus the last search that produced results."""

    buffer: str = ""
    committed_prefix: str | None = None
    committed_query: str = ""


@dataclass
class SessionState:
    geometry: GridGeometry
    search: SearchState = field(default_factory=SearchState)
    nav: NavState = field(default_factory=NavState)
    messages: MessageQueue = field(default_factory=MessageQueue)
    matches: list[str] = field(default_factory=list)
    results: list[str] = field(default_factory=list)
    generation: int = 0
    last_frame: FrameSnapshot | None = None
    verbose: bool = False
    skip_next_lf: bool = False
    selection: str | None = None
    quit: bool = False

    @property
    def selected_candidate(self) -> str | None:
        if 0 <= self.nav.selected_index < len(self.results):
            return self.results[self.nav.selected_index]
        return None

    def frame_snapshot(self) -> FrameSnapshot:
        return FrameSnapshot(
            generation=self.generation,
            items_per_row=self.geometry.items_per_row,
            selected_index=self.nav.selected_index if self.results else None,
        )
