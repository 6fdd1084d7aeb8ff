"""Run orchestration for block justification commands.

Responsibilities:
- Execute render and inspect stages with phase logging.
- Map stage failures to `JustifyStageError` diagnostics.
"""

from __future__ import annotations

from .config import JustifyConfig
from .errors import JustifyStageError, Stage
from .models.datatypes import LineReport
from .telemetry.logger import RunLogger
from .text.block import inspect_lines, render_block
from .text.normalizer import WhitespaceNormalizer


class JustifyRunner:
    """Justify text blocks according to one resolved configuration."""

    def __init__(
        self,
        config: JustifyConfig,
        run_logger: RunLogger | None = None,
        normalizer: WhitespaceNormalizer | None = None,
    ) -> None:
        """Bind configuration, logger, and line normalizer for subsequent runs."""

        self._config = config
        self._run_logger = run_logger or RunLogger(level=config.log_level)
        self._normalizer = normalizer or WhitespaceNormalizer()

    def render(self, text: str) -> list[str]:
        """Return justified rows for every line of `text`."""

        stage: Stage = "render"
        self._run_logger.log_stage_start(stage)
        try:
            rows = render_block(text, self._config.block_options(), self._normalizer)
        except ValueError as exc:
            self._run_logger.log_stage_failure(stage, type(exc).__name__)
            raise JustifyStageError(
                stage=stage,
                detail=f"Invalid layout options: {exc}",
                hint="Check `--width`, `--height`, and `--truncate-char` values.",
            ) from exc
        changed = sum(1 for row, line in zip(rows, text.splitlines()) if row != line)
        self._run_logger.log_stage_complete(stage, lines=len(rows), changed=changed)
        return rows

    def inspect(self, text: str) -> list[LineReport]:
        """Return per-line diagnostics for every line of `text`."""

        stage: Stage = "inspect"
        self._run_logger.log_stage_start(stage)
        try:
            reports = inspect_lines(text, self._config.block_options(), self._normalizer)
        except ValueError as exc:
            self._run_logger.log_stage_failure(stage, type(exc).__name__)
            raise JustifyStageError(
                stage=stage,
                detail=f"Invalid layout options: {exc}",
                hint="Check `--width` and `--truncate-char` values.",
            ) from exc
        self._run_logger.log_stage_complete(stage, lines=len(reports))
        return reports
