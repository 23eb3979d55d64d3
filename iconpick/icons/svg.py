"""SVG and licensing text for a selected icon."""

from __future__ import annotations

from pathlib import Path

from .cache import load_collection, load_icon_body, split_icon_id

PREVIEW_PIXELS = 96


def wrap_svg(width: int, height: int, body: str) -> str:
    """Wrap an Iconify body in a standalone white-on-dark ``<svg>`` document."""
    header = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{PREVIEW_PIXELS}" height="{PREVIEW_PIXELS}" '
        f'color="white" viewBox="0 0 {width} {height}">'
    )
    body = body.replace('stroke="#000"', 'stroke="#fff"')
    return f"{header}{body}</svg>"


def icon_svg(cache_dir: Path, icon_id: str) -> str:
    width, height, body = load_icon_body(cache_dir, icon_id)
    return wrap_svg(width, height, body)


def license_line(cache_dir: Path, icon_id: str) -> str:
    """Describe the collection, author, and license of ``icon_id``."""
    prefix, _name = split_icon_id(icon_id)
    collection = load_collection(cache_dir, prefix)
    line = collection.name
    if collection.author:
        line += f" by {collection.author}"
    license_parts = [part for part in (collection.license_title, collection.license_spdx) if part]
    if license_parts:
        line += f" ({', '.join(license_parts)})"
    return line
