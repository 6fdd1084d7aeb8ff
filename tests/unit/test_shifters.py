"""Unit tests for width-preserving line rotations."""

from __future__ import annotations

import pytest

from linejustify.text.shifters import (
    rotate_left_one,
    rotate_right_one,
    shift_whitespace_left,
    shift_whitespace_right,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("", ""),
        (" ", " "),
        ("     ", "     "),
        ("ABCDEF", "BCDEFA"),
        (" gh%Y^uio", "gh%Y^uio "),
    ],
)
def test_rotate_left_one(line: str, expected: str) -> None:
    """Left rotation should move the first character to the end."""

    assert rotate_left_one(line) == expected


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("", ""),
        (" ", " "),
        ("     ", "     "),
        ("ABCDEF", "FABCDE"),
        (" gh%Y^uio", "o gh%Y^ui"),
    ],
)
def test_rotate_right_one(line: str, expected: str) -> None:
    """Right rotation should move the last character to the front."""

    assert rotate_right_one(line) == expected


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("", ""),
        (" ", " "),
        ("     ", "     "),
        ("ABCDEF ", " ABCDEF"),
        ("ABC DEF    ", "    ABC DEF"),
        ("  ABC DEF    ", "      ABC DEF"),
    ],
)
def test_shift_whitespace_left(line: str, expected: str) -> None:
    """Trailing whitespace should move in front of the first word."""

    assert shift_whitespace_left(line) == expected


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("", ""),
        (" ", " "),
        ("     ", "     "),
        (" ABCDEF", "ABCDEF "),
        ("    ABC DEF    ", "ABC DEF        "),
        ("    ABC DEF  ", "ABC DEF      "),
    ],
)
def test_shift_whitespace_right(line: str, expected: str) -> None:
    """Leading whitespace should move behind the last word."""

    assert shift_whitespace_right(line) == expected


def test_shift_whitespace_left_handles_long_padding_without_recursion() -> None:
    """Edge shifting should cope with thousands of padding characters."""

    line = "word" + " " * 5000

    shifted = shift_whitespace_left(line)

    assert shifted == " " * 5000 + "word"
