"""Top-level package for linejustify.

This package redistributes the whitespace of single lines so that padding sits
between words instead of at the line edges, keeping each line's width. The main
entry point is `normalize_whitespace`.
"""

from .text import locate_least_gap, normalize_whitespace, word_count

__all__ = ["locate_least_gap", "normalize_whitespace", "word_count", "__version__"]

__version__ = "0.1.0"
