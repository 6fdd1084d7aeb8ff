"""Domain exceptions for CLI diagnostics."""

from __future__ import annotations

from typing import Literal, get_args

Stage = Literal["config", "input", "render", "inspect"]

STAGES: tuple[str, ...] = get_args(Stage)


class JustifyStageError(RuntimeError):
    """Raised when reading config or input, or justifying lines, fails.

    The core text helpers never raise; this error only wraps failures in the
    command layers around them.
    """

    def __init__(
        self,
        *,
        stage: Stage,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped error and reject unknown stage names."""

        if stage not in STAGES:
            raise ValueError(f"Unknown stage `{stage}`; expected one of: {', '.join(STAGES)}.")
        super().__init__(detail)
        self.stage: Stage = stage
        self.detail = detail
        self.hint = hint

    def summary(self, command_name: str) -> str:
        """Return the one-line diagnostic shown for a failed command."""

        return f"{command_name} failed at stage `{self.stage}`: {self.detail}"
