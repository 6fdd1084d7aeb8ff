"""Module entrypoint for running linejustify as ``python -m linejustify``."""

from __future__ import annotations

from linejustify.cli import main


if __name__ == "__main__":
    main()
