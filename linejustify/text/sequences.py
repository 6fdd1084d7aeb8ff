"""Whole-line predicates built on the character classifiers."""

from __future__ import annotations

from .classifiers import is_whitespace


def is_all_whitespace(seq: str) -> bool:
    """Return whether every character is whitespace.

    The empty line counts as all whitespace.
    """

    return all(is_whitespace(char) for char in seq)


def word_count(seq: str) -> int:
    """Count maximal runs of non-whitespace characters.

    Newlines and tabs are whitespace here, so `"\\n f23 \\n \\t"` holds a
    single run.
    """

    count = 0
    in_word = False
    for char in seq:
        if is_whitespace(char):
            in_word = False
        elif not in_word:
            in_word = True
            count += 1
    return count


def is_normalizable(seq: str) -> bool:
    """Return whether a line has width and at least one non-whitespace character."""

    return len(seq) > 0 and not is_all_whitespace(seq)
