"""Module entrypoint for ``python -m iconpick``.

All argument parsing and runtime setup happen in ``iconpick.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
