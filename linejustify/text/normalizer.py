"""Whitespace redistribution for single-line justification.

Responsibilities:
- Move leading and trailing whitespace into the gaps between words.
- Preserve line width and the order of every non-whitespace character.
"""

from __future__ import annotations

from typing import Iterable

from .classifiers import is_whitespace
from .gaps import NOT_FOUND, locate_least_gap
from .sequences import is_all_whitespace, is_normalizable, word_count
from .shifters import shift_whitespace_left

CANONICAL_SPACE = " "


def normalize(seq: str) -> str:
    """Migrate leading whitespace, one character per pass, into the narrowest gap.

    Each pass drops the first character and inserts `CANONICAL_SPACE` right
    after the gap index found in the line before the drop. Stops when the line
    no longer starts with whitespace or has no usable gap.
    """

    while is_normalizable(seq) and is_whitespace(seq[0]):
        index = locate_least_gap(seq)
        if index == NOT_FOUND:
            break
        seq = seq[1 : index + 1] + CANONICAL_SPACE + seq[index + 1 :]
    return seq


def normalize_whitespace(seq: str) -> str:
    """Spread a line's edge whitespace across its interior gaps.

    Lines that are empty, all whitespace, or hold fewer than two words are
    returned unchanged.

    Example:
        `"    Test something here"` -> `"Test   something   here"`.
    """

    if not seq or is_all_whitespace(seq) or word_count(seq) < 2:
        return seq
    return normalize(shift_whitespace_left(seq))


class WhitespaceNormalizer:
    """Justify individual lines by redistributing their whitespace."""

    def normalize(self, line: str) -> str:
        """Return the justified form of one line."""

        return normalize_whitespace(line)

    def normalize_lines(self, lines: Iterable[str]) -> list[str]:
        """Justify each line independently."""

        return [normalize_whitespace(line) for line in lines]
