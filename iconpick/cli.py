"""Command-line front door for iconpick.

Parses CLI options, merges them with persisted config, and either prints the
matching icon identifiers or launches the interactive grid browser.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_copy_to_clipboard, load_custom_output, load_default_browse, load_theme_name
from .errors import QueryParseError, RetrievalError
from .icons import CachedIconSource
from .logs import configure_logging
from .output import DEFAULT_SVG_STYLE, OutputOptions, emit_selection
from .query import compile_query
from .runtime import run_browser
from .ui_theme import available_theme_names, resolve_theme


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iconpick",
        description="Search cached icon sets with boolean queries and pick one interactively.",
    )
    parser.add_argument("query", nargs="?", default=None, help="Boolean search query, e.g. 'arrow & !circle'.")
    parser.add_argument("-p", "--prefix", default=None, help="Only search the collection with this prefix.")
    parser.add_argument("-b", "--browse", action="store_true", help="Open the interactive grid browser.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging and on-screen debug overlay.")
    parser.add_argument("--svg", action="store_true", help="Print the selected icon as SVG.")
    parser.add_argument("--license", action="store_true", help="Print licensing details of the selected icon.")
    parser.add_argument("--copy", action="store_true", help="Copy the selected icon identifier to the clipboard.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--style", default=DEFAULT_SVG_STYLE, help="Pygments style name for SVG output.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--cache-dir", type=Path, default=None, help="Icon cache directory.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run a one-shot search or a browse session."""
    args = build_parser().parse_args(argv)
    browse = args.browse or load_default_browse()
    configure_logging(args.verbose, interactive=browse)

    try:
        compile_query(args.query)
    except QueryParseError as exc:
        raise SystemExit(f"Invalid query: {exc}") from exc

    source = CachedIconSource(args.cache_dir)

    if not browse:
        try:
            found = source.retrieve(args.query, args.prefix)
        except RetrievalError as exc:
            raise SystemExit(str(exc)) from exc
        sys.stdout.write("".join(f"{icon_id}\n" for icon_id in found))
        return

    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise SystemExit("Interactive browsing requires a terminal.")

    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)
    try:
        selection = run_browser(source, args.query, args.prefix, theme, verbose=args.verbose)
    except RetrievalError as exc:
        raise SystemExit(str(exc)) from exc
    if selection is None:
        return

    options = OutputOptions(
        svg=args.svg,
        license=args.license,
        copy=args.copy or load_copy_to_clipboard(),
        color=not args.no_color and sys.stdout.isatty(),
        style=args.style,
        template=load_custom_output(),
    )
    emit_selection(selection, source.cache_dir, options, sys.stdout)


if __name__ == "__main__":
    main()
