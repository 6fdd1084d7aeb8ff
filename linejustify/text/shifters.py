"""Width-preserving rotations of a line.

Responsibilities:
- Rotate a line by one character in either direction.
- Move edge whitespace from one end of a line to the other.

Lines that are empty or all whitespace are returned unchanged by every helper.
"""

from __future__ import annotations

from .classifiers import is_whitespace
from .sequences import is_normalizable


def rotate_left_one(seq: str) -> str:
    """Move the first character to the end: `"ABCDEF"` -> `"BCDEFA"`."""

    if not is_normalizable(seq):
        return seq
    return seq[1:] + seq[0]


def rotate_right_one(seq: str) -> str:
    """Move the last character to the front: `"ABCDEF"` -> `"FABCDE"`."""

    if not is_normalizable(seq):
        return seq
    return seq[-1] + seq[:-1]


def shift_whitespace_left(seq: str) -> str:
    """Move trailing whitespace in front of the first non-whitespace character.

    `"ABC DEF    "` becomes `"    ABC DEF"`; existing leading whitespace is kept
    and the moved run lands in front of it.
    """

    if not is_normalizable(seq):
        return seq
    while is_whitespace(seq[-1]):
        seq = rotate_right_one(seq)
    return seq


def shift_whitespace_right(seq: str) -> str:
    """Move leading whitespace behind the last non-whitespace character."""

    if not is_normalizable(seq):
        return seq
    while is_whitespace(seq[0]):
        seq = rotate_left_one(seq)
    return seq
