"""Logging setup for the command-line entrypoint.

Interactive sessions log to a file so records never land on the raw-mode
screen; one-shot commands log to stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "iconpick"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / "iconpick.log"


def configure_logging(verbose: bool, interactive: bool) -> logging.Handler:
    """Install one handler on the ``iconpick`` logger and return it."""
    level = logging.INFO if verbose else logging.WARNING
    if interactive:
        LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger(APP_NAME)
    for existing in list(root.handlers):
        root.removeHandler(existing)
        existing.close()
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    return handler
