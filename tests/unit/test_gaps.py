"""Unit tests for the least-whitespace gap search."""

from __future__ import annotations

import pytest

from linejustify.text.gaps import NOT_FOUND, locate_least_gap


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        (" a b", 2),
        (" a   ", -1),
        ("a \nb c", 4),
        ("", -1),
        ("     ", -1),
        ("word", -1),
        ("  word  ", -1),
    ],
)
def test_locate_least_gap_literal_cases(line: str, expected: int) -> None:
    """Gap search should match the documented reference results."""

    assert locate_least_gap(line) == expected


def test_locate_least_gap_prefers_narrower_later_gap() -> None:
    """A strictly narrower gap to the right should replace an earlier one."""

    assert locate_least_gap("a  b c") == 4


def test_locate_least_gap_keeps_leftmost_on_ties() -> None:
    """Equally narrow gaps should resolve to the leftmost one."""

    assert locate_least_gap("a b c") == 1
    assert locate_least_gap("  a   b   c  ") == 5


def test_locate_least_gap_ignores_gap_after_newline_control() -> None:
    """The gap closed after a newline control should never be chosen."""

    assert locate_least_gap("a\nb") == NOT_FOUND
    assert locate_least_gap("a \n b") == NOT_FOUND
    assert locate_least_gap("a b\nc d") == 1


def test_locate_least_gap_treats_other_controls_as_word_characters() -> None:
    """Bell and similar controls should extend the surrounding word."""

    assert locate_least_gap("a\a b") == 2
    assert locate_least_gap("a\x1f b") == 2


def test_locate_least_gap_ignores_gap_after_carriage_return() -> None:
    """Carriage return should suppress the following gap like line feed does."""

    assert locate_least_gap("a \rb c") == 4
    assert locate_least_gap("a\rb") == NOT_FOUND
    assert locate_least_gap("a b\r\nc d") == 1
