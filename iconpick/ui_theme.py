"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the grid, status rows, and toasts. Colour for the
printed SVG after a selection is a separate Pygments style setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    selection: str
    label: str
    label_prefix: str
    status: str
    search_prompt: str
    overlay: str
    message_info: str
    message_warning: str
    message_error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    selection="\033[97;44m",
    label="\033[38;5;252m",
    label_prefix="\033[2;38;5;250m",
    status="\033[38;5;252m",
    search_prompt="\033[1;38;5;81m",
    overlay="\033[2;38;5;250m",
    message_info="\033[38;5;42m",
    message_warning="\033[38;5;214m",
    message_error="\033[38;5;203m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    selection="\033[97;48;5;24m",
    label="\033[38;5;153m",
    label_prefix="\033[2;38;5;110m",
    status="\033[38;5;117m",
    search_prompt="\033[1;38;5;45m",
    overlay="\033[2;38;5;110m",
    message_info="\033[38;5;84m",
    message_warning="\033[38;5;215m",
    message_error="\033[38;5;204m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    selection="\033[7m",
    label="",
    label_prefix="",
    status="",
    search_prompt="",
    overlay="",
    message_info="",
    message_warning="",
    message_error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode.

    The plain theme still reverses the selected cell so the cursor stays visible.
    """
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
