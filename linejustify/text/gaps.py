"""Least-whitespace gap search.

Responsibilities:
- Find the interior whitespace run (gap) with the smallest width.
- Skip gaps that follow a newline control character.

A gap is the run of whitespace strictly between two words; leading and
trailing whitespace never form a gap.
"""

from __future__ import annotations

from .classifiers import is_newline_control, is_whitespace

NOT_FOUND = -1


def locate_least_gap(seq: str) -> int:
    """Return the index of the last whitespace character of the narrowest gap.

    The scan runs once, left to right. Gaps are compared only when the next word
    starts, and only with a strict `<`, so the leftmost of equally narrow gaps
    wins. A newline control resets the running gap and marks the gap that ends
    at the next word as ignored.

    Returns:
        Index of the whitespace character immediately before the word that
        closes the narrowest gap, or `NOT_FOUND` when the line has no usable
        interior gap.

    Examples:
        `" a b"` -> 2, `" a   "` -> -1, `"a \\nb c"` -> 4.
    """

    best = len(seq)
    candidate = NOT_FOUND
    gap = 0
    in_word = False
    seen_word = False
    ignore = False

    for index, char in enumerate(seq):
        if is_newline_control(char):
            ignore = True
            gap = 0
            in_word = False
            continue
        if is_whitespace(char):
            in_word = False
            if seen_word:
                gap += 1
            continue
        if in_word:
            continue
        if seen_word and not ignore and gap < best:
            best = gap
            candidate = index
        ignore = False
        gap = 0
        in_word = True
        seen_word = True

    if candidate == NOT_FOUND:
        return NOT_FOUND
    return candidate - 1
