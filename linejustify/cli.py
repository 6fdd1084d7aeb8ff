"""Command-line interface for linejustify.

Responsibilities:
- Expose user-facing commands for justifying and inspecting lines.
- Convert CLI arguments into `JustifyConfig` and execute runs.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_line_reports, echo_rows, exit_with_command_error
from .config import ConfigLoader, JustifyConfig
from .errors import JustifyStageError
from .runner import JustifyRunner

app = typer.Typer(
    name="linejustify",
    no_args_is_help=True,
    help="Redistribute line whitespace between words while keeping line width.",
)


def _load_base_config(config_path: Path | None) -> JustifyConfig:
    """Load YAML config when requested, environment config otherwise."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise JustifyStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the `LINEJUSTIFY_*` variables and rerun.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise JustifyStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise JustifyStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise JustifyStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_config(
    config_file: Path | None,
    width: int | None = None,
    height: int | None = None,
    truncate: bool | None = None,
    truncate_char: str | None = None,
) -> JustifyConfig:
    """Resolve effective config from YAML/env defaults and explicit CLI overrides."""

    base = _load_base_config(config_file)
    return replace(
        base,
        width=width if width is not None else base.width,
        height=height if height is not None else base.height,
        truncate=truncate if truncate is not None else base.truncate,
        truncate_char=truncate_char if truncate_char is not None else base.truncate_char,
    )


def _read_input_text(text: str | None) -> str:
    """Return the explicit text argument or the whole of stdin."""

    if text is not None:
        return text
    try:
        return typer.get_text_stream("stdin").read()
    except OSError as exc:
        raise JustifyStageError(
            stage="input",
            detail=f"Failed to read standard input: {exc}",
            hint="Pass the text as an argument instead.",
        ) from exc


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
TextArgument = Annotated[
    str | None,
    typer.Argument(help="Text to justify. Reads standard input when omitted."),
]
WidthOption = Annotated[
    int | None,
    typer.Option("--width", help="Target row width; shorter lines are padded first."),
]


@app.command("justify")
def justify_command(
    text: TextArgument = None,
    width: WidthOption = None,
    height: Annotated[
        int | None,
        typer.Option("--height", help="Target row count; blank rows pad short input."),
    ] = None,
    truncate: Annotated[
        bool | None,
        typer.Option(
            "--truncate/--no-truncate",
            help="Cut rows wider than `--width`.",
        ),
    ] = None,
    truncate_char: Annotated[
        str | None,
        typer.Option("--truncate-char", help="Marker for the last cell of a cut row."),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Justify every input line and print one row per line."""

    try:
        config = _resolve_config(
            config_file=config_file,
            width=width,
            height=height,
            truncate=truncate,
            truncate_char=truncate_char,
        )
        rows = JustifyRunner(config).render(_read_input_text(text))
    except Exception as exc:
        exit_with_command_error("justify", exc)

    echo_rows(rows)


@app.command("inspect")
def inspect_command(
    text: TextArgument = None,
    width: WidthOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Print word count, least-gap index, and justified text per line."""

    try:
        config = _resolve_config(config_file=config_file, width=width)
        reports = JustifyRunner(config).inspect(_read_input_text(text))
    except Exception as exc:
        exit_with_command_error("inspect", exc)

    echo_line_reports(reports)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
