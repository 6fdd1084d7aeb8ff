"""Core datatypes shared across linejustify modules.

Responsibilities:
- Represent immutable records exchanged between the CLI and text stages.
- Provide explicit typing for layout options and line diagnostics.

Key types:
- `BlockOptions`, `LineReport`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BlockOptions:
    """Layout parameters for justifying a block of lines.

    Attributes:
        width: Target row width in characters, or `None` to keep each line's width.
        height: Target row count, or `None` to keep the input line count.
        truncate: Whether lines wider than `width` are cut to `width`.
        truncate_char: Marker written into the last cell of a truncated row.
    """

    width: int | None = None
    height: int | None = None
    truncate: bool = False
    truncate_char: str = "~"

    def validate(self) -> None:
        """Validate option values and raise `ValueError` on invalid input."""

        if self.width is not None and self.width <= 0:
            raise ValueError("`width` must be a positive integer.")
        if self.height is not None and self.height <= 0:
            raise ValueError("`height` must be a positive integer.")
        if len(self.truncate_char) != 1:
            raise ValueError("`truncate_char` must be exactly one character.")


@dataclass(frozen=True, slots=True)
class LineReport:
    """Diagnostics for one input line.

    Attributes:
        index: 1-based line number.
        text: Line text after width fitting.
        width: Character count of `text`.
        word_count: Number of non-whitespace runs.
        all_whitespace: Whether the line holds only whitespace.
        least_gap: Index returned by the least-gap search (`-1` when absent).
        justified: Line text after whitespace redistribution.
    """

    index: int
    text: str
    width: int
    word_count: int
    all_whitespace: bool
    least_gap: int
    justified: str
