"""Key bindings for the browsing and searching modes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..runtime.navigation import Direction
from .key_registry import KeyComboBinding, KeyComboRegistry

MOVE_KEYS: dict[str, Direction] = {
    "UP": Direction.UP,
    "k": Direction.UP,
    "DOWN": Direction.DOWN,
    "j": Direction.DOWN,
    "LEFT": Direction.LEFT,
    "h": Direction.LEFT,
    "RIGHT": Direction.RIGHT,
    "l": Direction.RIGHT,
}


@dataclass(frozen=True)
class BrowseKeyActions:
    """Operations reachable from browsing mode."""

    move: Callable[[Direction], bool]
    commit_selection: Callable[[], None]
    start_search: Callable[[], None]
    narrow_to_prefix: Callable[[], None]
    quit: Callable[[], None]


@dataclass(frozen=True)
class SearchKeyActions:
    """Operations reachable while editing the search buffer."""

    commit_search: Callable[[], None]
    cancel_search: Callable[[], None]
    delete_char: Callable[[], None]
    append_char: Callable[[str], None]
    quit: Callable[[], None]


def build_browse_registry(actions: BrowseKeyActions) -> KeyComboRegistry:
    registry = KeyComboRegistry()
    for key, direction in MOVE_KEYS.items():
        registry.register_binding(KeyComboBinding((key,), lambda direction=direction: actions.move(direction)))
    return registry.register_bindings(
        KeyComboBinding(("ENTER",), actions.commit_selection),
        KeyComboBinding(("s",), actions.start_search),
        KeyComboBinding(("g",), actions.narrow_to_prefix),
        KeyComboBinding(("ESC", "q", "CTRL_C"), actions.quit),
    )


def build_search_registry(actions: SearchKeyActions) -> KeyComboRegistry:
    return KeyComboRegistry().register_bindings(
        KeyComboBinding(("ENTER",), actions.commit_search),
        KeyComboBinding(("ESC",), actions.cancel_search),
        KeyComboBinding(("BACKSPACE",), actions.delete_char),
        KeyComboBinding(("CTRL_C",), actions.quit),
    )


def is_text_key(key: str) -> bool:
    """Return whether ``key`` is a single printable character token."""
    return len(key) == 1 and key.isprintable()


def handle_search_key(key: str, registry: KeyComboRegistry, actions: SearchKeyActions) -> bool:
    """Dispatch ``key`` in searching mode, appending printable characters.

    Returns ``True`` when the key was consumed.
    """
    if registry.handles(key):
        registry.dispatch(key)
        return True
    if is_text_key(key):
        actions.append_char(key)
        return True
    return False
