"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
justified rows, and per-line inspection reports.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import JustifyStageError
from .models.datatypes import LineReport


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, JustifyStageError):
        typer.secho(exc.summary(command_name), fg=typer.colors.RED, err=True)
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_rows(rows: list[str]) -> None:
    """Print justified rows one per line."""

    for row in rows:
        typer.echo(row)


def echo_line_reports(reports: list[LineReport]) -> None:
    """Print compact deterministic per-line diagnostics."""

    for report in reports:
        typer.echo(
            f"{report.index}. width={report.width} words={report.word_count} "
            f"blank={'yes' if report.all_whitespace else 'no'} "
            f"gap={report.least_gap} [{report.justified}]"
        )
