"""Post-selection output: identifier, SVG, licensing, and clipboard.

Runs after terminal state is restored, so everything here writes to plain
stdout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import pyperclip
from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import XmlLexer
from pygments.util import ClassNotFound

from .errors import IconPickError
from .icons import icon_svg, license_line

logger = logging.getLogger(__name__)

DEFAULT_SVG_STYLE = "monokai"


@dataclass(frozen=True)
class OutputOptions:
    svg: bool = False
    license: bool = False
    copy: bool = False
    color: bool = False
    style: str = DEFAULT_SVG_STYLE
    template: str | None = None


def highlight_svg(svg: str, style: str = DEFAULT_SVG_STYLE) -> str:
    """Colorize SVG markup for a terminal, falling back to the default style."""
    try:
        formatter = Terminal256Formatter(style=style)
    except ClassNotFound:
        formatter = Terminal256Formatter(style=DEFAULT_SVG_STYLE)
    return highlight(svg, XmlLexer(), formatter).rstrip("\n")


def format_selection(icon_id: str, template: str | None) -> str:
    """Apply ``template`` with ``{icon}``, ``{prefix}`` and ``{name}`` fields."""
    if template is None:
        return icon_id
    prefix, _, name = icon_id.partition(":")
    try:
        return template.format(icon=icon_id, prefix=prefix, name=name)
    except (KeyError, IndexError, ValueError) as exc:
        logger.warning("Ignoring invalid output template %r: %s", template, exc)
        return icon_id


def copy_to_clipboard(text: str) -> bool:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        logger.warning("Clipboard copy failed: %s", exc)
        return False
    return True


def emit_selection(icon_id: str, cache_dir: Path, options: OutputOptions, stream: TextIO) -> None:
    """Print the selected icon and any requested extras to ``stream``.

    Missing collection data for SVG or license output is reported inline rather
    than aborting after a successful selection.
    """
    text = format_selection(icon_id, options.template)
    stream.write(text + "\n")
    if options.copy and copy_to_clipboard(text):
        logger.info("Copied %r to clipboard", text)

    if options.svg:
        try:
            svg = icon_svg(cache_dir, icon_id)
        except IconPickError as exc:
            stream.write(f"\n{exc}\n")
        else:
            stream.write("\n" + (highlight_svg(svg, options.style) if options.color else svg) + "\n")

    if options.license:
        try:
            stream.write(f"\n{license_line(cache_dir, icon_id)}\n")
        except IconPickError as exc:
            stream.write(f"\n{exc}\n")
