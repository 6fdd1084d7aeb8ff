"""Block-level caller for per-line justification.

Responsibilities:
- Fit raw lines to a target width before justification.
- Justify each line independently and shape the result to a target height.

Word wrapping is not performed; each input line maps to at most one row.
"""

from __future__ import annotations

from typing import Iterable

from ..models.datatypes import BlockOptions, LineReport
from .gaps import locate_least_gap
from .normalizer import CANONICAL_SPACE, WhitespaceNormalizer
from .sequences import is_all_whitespace, word_count


def fit_line(
    line: str,
    width: int | None,
    truncate: bool = False,
    truncate_char: str = "~",
) -> str:
    """Pad or cut one line to `width`.

    Short lines are left-padded so the padding becomes leading whitespace that
    justification later spreads between words. Long lines are cut only when
    `truncate` is set, with `truncate_char` in the last kept cell.
    """

    if width is None:
        return line
    if len(line) < width:
        return CANONICAL_SPACE * (width - len(line)) + line
    if len(line) > width and truncate:
        return line[: width - 1] + truncate_char
    return line


def justify_lines(
    lines: Iterable[str],
    options: BlockOptions,
    normalizer: WhitespaceNormalizer | None = None,
) -> list[str]:
    """Fit and justify each line with the given block options."""

    normalizer = normalizer or WhitespaceNormalizer()
    return normalizer.normalize_lines(
        fit_line(line, options.width, options.truncate, options.truncate_char)
        for line in lines
    )


def render_block(
    text: str,
    options: BlockOptions,
    normalizer: WhitespaceNormalizer | None = None,
) -> list[str]:
    """Split text into lines, justify them, and apply the target height."""

    options.validate()
    rows = justify_lines(text.splitlines(), options, normalizer)
    if options.height is None:
        return rows
    if len(rows) >= options.height:
        return rows[: options.height]
    blank = CANONICAL_SPACE * options.width if options.width is not None else ""
    return rows + [blank] * (options.height - len(rows))


def inspect_lines(
    text: str,
    options: BlockOptions,
    normalizer: WhitespaceNormalizer | None = None,
) -> list[LineReport]:
    """Build per-line diagnostics for fitted input lines."""

    options.validate()
    normalizer = normalizer or WhitespaceNormalizer()
    reports: list[LineReport] = []
    for position, raw_line in enumerate(text.splitlines(), start=1):
        line = fit_line(raw_line, options.width, options.truncate, options.truncate_char)
        reports.append(
            LineReport(
                index=position,
                text=line,
                width=len(line),
                word_count=word_count(line),
                all_whitespace=is_all_whitespace(line),
                least_gap=locate_least_gap(line),
                justified=normalizer.normalize(line),
            )
        )
    return reports
