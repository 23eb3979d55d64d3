"""Cached icon corpus access and selected-icon assets."""

from __future__ import annotations

from .cache import DEFAULT_CACHE_DIR, IconCollection, load_collection, load_icon_body, load_icon_ids, split_icon_id
from .source import CachedIconSource, CandidateSource, filter_by_prefix, join_search_string, split_search_string
from .svg import icon_svg, license_line, wrap_svg

__all__ = [
    "DEFAULT_CACHE_DIR",
    "CachedIconSource",
    "CandidateSource",
    "IconCollection",
    "filter_by_prefix",
    "icon_svg",
    "join_search_string",
    "license_line",
    "load_collection",
    "load_icon_body",
    "load_icon_ids",
    "split_icon_id",
    "split_search_string",
    "wrap_svg",
]
