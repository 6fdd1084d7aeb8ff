"""Line justification building blocks.

This package provides pure, width-preserving helpers that classify characters,
rotate lines, locate the narrowest interior gap, and redistribute whitespace.
"""

from .block import fit_line, inspect_lines, justify_lines, render_block
from .classifiers import is_newline_control, is_whitespace
from .gaps import NOT_FOUND, locate_least_gap
from .normalizer import CANONICAL_SPACE, WhitespaceNormalizer, normalize, normalize_whitespace
from .sequences import is_all_whitespace, is_normalizable, word_count
from .shifters import (
    rotate_left_one,
    rotate_right_one,
    shift_whitespace_left,
    shift_whitespace_right,
)

__all__ = [
    "CANONICAL_SPACE",
    "NOT_FOUND",
    "WhitespaceNormalizer",
    "fit_line",
    "inspect_lines",
    "is_all_whitespace",
    "is_newline_control",
    "is_normalizable",
    "is_whitespace",
    "justify_lines",
    "locate_least_gap",
    "normalize",
    "normalize_whitespace",
    "render_block",
    "rotate_left_one",
    "rotate_right_one",
    "shift_whitespace_left",
    "shift_whitespace_right",
    "word_count",
]
