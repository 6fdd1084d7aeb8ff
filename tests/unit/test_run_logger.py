"""Unit tests for deterministic phase logging."""

from __future__ import annotations

import io

from linejustify.telemetry.logger import RunLogger


def test_run_logger_emits_sorted_context_tokens() -> None:
    """Completion events should list context keys in sorted order."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink, level="INFO")

    run_logger.log_stage_start("render")
    run_logger.log_stage_complete("render", lines=2, changed=1)

    assert sink.getvalue().splitlines() == [
        "[phase] level=INFO stage=render event=start",
        "[phase] level=INFO stage=render event=complete changed=1 lines=2",
    ]


def test_run_logger_filters_events_below_level() -> None:
    """Info events should be suppressed at the default warning level."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink)

    run_logger.log_stage_start("render")
    run_logger.log_stage_failure("render", "Value Error")

    assert sink.getvalue().splitlines() == [
        "[phase] level=ERROR stage=render event=failure error_type=Value_Error",
    ]
