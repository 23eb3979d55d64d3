"""On-disk icon cache layout and readers.

The cache holds a flat ``icons.txt`` corpus plus one Iconify icon-set JSON
document per collection. Filling the cache is handled elsewhere; these helpers
only read it.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_data_dir

from ..errors import IconNotFoundError, RetrievalError

logger = logging.getLogger(__name__)

APP_NAME = "iconpick"
DEFAULT_CACHE_DIR = Path(user_data_dir(APP_NAME, appauthor=False)) / "cache"
ICONS_FILENAME = "icons.txt"
COLLECTIONS_DIRNAME = "collections"
DEFAULT_ICON_SIZE = 16


@dataclass(frozen=True)
class IconCollection:
    """Subset of an Iconify icon-set document used for output."""

    prefix: str
    name: str
    author: str
    license_title: str
    license_spdx: str
    width: int = DEFAULT_ICON_SIZE
    height: int = DEFAULT_ICON_SIZE
    icons: dict[str, dict[str, object]] = field(default_factory=dict)


def _positive_int(value: object, fallback: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return fallback
    return value


def icons_path(cache_dir: Path) -> Path:
    return cache_dir / ICONS_FILENAME


def collection_path(cache_dir: Path, prefix: str) -> Path:
    return cache_dir / COLLECTIONS_DIRNAME / f"{prefix}.json"


def load_icon_ids(cache_dir: Path) -> list[str]:
    """Read the cached corpus, one ``prefix:name`` identifier per line.

    Blank lines are skipped. Raises ``RetrievalError`` when the file is missing
    or unreadable.
    """
    path = icons_path(cache_dir)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise RetrievalError(f"No icon cache found at {path}") from exc
    except OSError as exc:
        raise RetrievalError(f"Could not read icon cache {path}: {exc}") from exc
    icon_ids = [line.strip() for line in text.splitlines() if line.strip()]
    logger.info("Loaded %d icon ids from %s", len(icon_ids), path)
    return icon_ids


def load_collection(cache_dir: Path, prefix: str) -> IconCollection:
    """Load one cached icon-set document.

    Missing optional metadata falls back to empty strings and 16x16 geometry.
    """
    path = collection_path(cache_dir, prefix)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise RetrievalError(f"Collection {prefix!r} is not cached at {path}") from exc
    except (OSError, ValueError) as exc:
        raise RetrievalError(f"Could not read collection {prefix!r}: {exc}") from exc
    if not isinstance(data, dict):
        raise RetrievalError(f"Collection {prefix!r} is not a JSON object")

    info = data.get("info") if isinstance(data.get("info"), dict) else {}
    author = info.get("author") if isinstance(info.get("author"), dict) else {}
    license_info = info.get("license") if isinstance(info.get("license"), dict) else {}
    icons = data.get("icons") if isinstance(data.get("icons"), dict) else {}

    return IconCollection(
        prefix=str(data.get("prefix") or prefix),
        name=str(info.get("name") or prefix),
        author=str(author.get("name") or ""),
        license_title=str(license_info.get("title") or ""),
        license_spdx=str(license_info.get("spdx") or ""),
        width=_positive_int(data.get("width"), DEFAULT_ICON_SIZE),
        height=_positive_int(data.get("height"), DEFAULT_ICON_SIZE),
        icons={name: icon for name, icon in icons.items() if isinstance(icon, dict)},
    )


def split_icon_id(icon_id: str) -> tuple[str, str]:
    """Split ``prefix:name`` into its parts."""
    prefix, sep, name = icon_id.partition(":")
    if not sep or not prefix or not name:
        raise IconNotFoundError(f"Not a prefix:name icon identifier: {icon_id!r}")
    return prefix, name


def load_icon_body(cache_dir: Path, icon_id: str) -> tuple[int, int, str]:
    """Return ``(width, height, svg_body)`` for a cached icon.

    Per-icon dimensions override the collection defaults.
    """
    prefix, name = split_icon_id(icon_id)
    collection = load_collection(cache_dir, prefix)
    icon = collection.icons.get(name)
    if icon is None:
        raise IconNotFoundError(f"Could not find icon {icon_id!r}")
    body = icon.get("body")
    if not isinstance(body, str):
        raise IconNotFoundError(f"Icon {icon_id!r} has no SVG body")
    width = _positive_int(icon.get("width"), collection.width)
    height = _positive_int(icon.get("height"), collection.height)
    return width, height, body
