"""Shared pytest fixtures for the full linejustify test suite."""

from __future__ import annotations

import pytest

_ENV_KEYS = (
    "LINEJUSTIFY_WIDTH",
    "LINEJUSTIFY_HEIGHT",
    "LINEJUSTIFY_TRUNCATE",
    "LINEJUSTIFY_TRUNCATE_CHAR",
    "LINEJUSTIFY_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_linejustify_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear `LINEJUSTIFY_*` variables so host settings never leak into tests."""

    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
