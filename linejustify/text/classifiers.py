"""Per-character classification for line justification.

Responsibilities:
- Decide whether a single character counts as whitespace.
- Recognize the newline-family control characters that break gap tracking.
"""

from __future__ import annotations

import unicodedata

_NEWLINE_CONTROLS = frozenset({"\r", "\n"})
# Information separators: `str.isspace` accepts them, Unicode White_Space does not.
_SEPARATOR_CONTROLS = frozenset({"\x1c", "\x1d", "\x1e", "\x1f"})


def is_whitespace(char: str) -> bool:
    """Return whether `char` has the Unicode White_Space property."""

    return char.isspace() and char not in _SEPARATOR_CONTROLS


def is_newline_control(char: str) -> bool:
    """Return whether `char` is a carriage-return or line-feed control character.

    Other control characters (for example bell) are neither newline controls
    nor whitespace.
    """

    return char in _NEWLINE_CONTROLS and unicodedata.category(char) == "Cc"
