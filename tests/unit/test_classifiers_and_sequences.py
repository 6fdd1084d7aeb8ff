"""Unit tests for character classifiers and whole-line predicates."""

from __future__ import annotations

import pytest

from linejustify.text.classifiers import is_newline_control, is_whitespace
from linejustify.text.sequences import is_all_whitespace, is_normalizable, word_count


@pytest.mark.parametrize("char", [" ", "\t", "\n", "\r", "\u00a0", "\u3000"])
def test_is_whitespace_accepts_unicode_spaces(char: str) -> None:
    """Space-like characters, including newline and tab, should be whitespace."""

    assert is_whitespace(char) is True


@pytest.mark.parametrize(
    "char", ["a", "_", "%", "\a", "7", "\x1c", "\x1d", "\x1e", "\x1f"]
)
def test_is_whitespace_rejects_word_characters(char: str) -> None:
    """Visible characters and non-space controls should not be whitespace."""

    assert is_whitespace(char) is False


def test_is_newline_control_only_matches_carriage_return_and_line_feed() -> None:
    """Only CR and LF should count as newline controls."""

    assert is_newline_control("\n") is True
    assert is_newline_control("\r") is True
    assert is_newline_control("\t") is False
    assert is_newline_control("\a") is False
    assert is_newline_control(" ") is False
    assert is_newline_control(" ") is False


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("", True),
        (" ", True),
        ("     ", True),
        (" " * 50, True),
        ("t", False),
        ("  t  ", False),
        (" " * 50 + "THING", False),
    ],
)
def test_is_all_whitespace(line: str, expected: bool) -> None:
    """All-whitespace detection should treat the empty line as whitespace."""

    assert is_all_whitespace(line) is expected


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("  abc  def      ghi", 3),
        (" a c g y 34           35", 6),
        (" abc def  _   feff  ", 4),
        ("\n f23 \n \t", 1),
        ("", 0),
        ("   ", 0),
        ("a\ab", 1),
        ("a\x1fb", 1),
        ("\x1c a \x1e", 3),
    ],
)
def test_word_count(line: str, expected: int) -> None:
    """Word count should count maximal non-whitespace runs."""

    assert word_count(line) == expected


def test_is_normalizable_requires_width_and_content() -> None:
    """Only non-empty lines with some non-whitespace should be normalizable."""

    assert is_normalizable("") is False
    assert is_normalizable("   ") is False
    assert is_normalizable(" x ") is True
