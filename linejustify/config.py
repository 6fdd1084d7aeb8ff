"""Configuration model and loaders for linejustify.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `JustifyConfig`: normalized settings for one justification run.
- `ConfigLoader`: static construction helpers for `JustifyConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models.datatypes import BlockOptions
from .parsing import (
    normalize_optional_string,
    parse_optional_positive_int,
    parse_permissive_boolean,
    parse_required_boolean,
)


_DEFAULT_TRUNCATE_CHAR = "~"
_DEFAULT_LOG_LEVEL = "WARNING"
_SUPPORTED_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"})


@dataclass(slots=True)
class JustifyConfig:
    """Runtime configuration for one justification run.

    Attributes:
        width: Target row width; shorter lines are padded before justification.
        height: Target row count for rendered blocks.
        truncate: Whether rows wider than `width` are cut.
        truncate_char: Marker written into the last cell of a cut row.
        log_level: Minimum `loguru` level for phase logs.
    """

    width: int | None = None
    height: int | None = None
    truncate: bool = False
    truncate_char: str = _DEFAULT_TRUNCATE_CHAR
    log_level: str = _DEFAULT_LOG_LEVEL

    def validate(self) -> None:
        """Validate configuration values and raise `ValueError` on invalid input."""

        self.block_options().validate()
        if self.log_level not in _SUPPORTED_LOG_LEVELS:
            supported = ", ".join(sorted(_SUPPORTED_LOG_LEVELS))
            raise ValueError(f"`log_level` must be one of: {supported}.")

    def block_options(self) -> BlockOptions:
        """Return layout options derived from this configuration."""

        return BlockOptions(
            width=self.width,
            height=self.height,
            truncate=self.truncate,
            truncate_char=self.truncate_char,
        )


class ConfigLoader:
    """Factory methods for creating `JustifyConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"width", "height", "truncate", "truncate_char", "log_level"})

    @staticmethod
    def from_yaml(path: Path) -> JustifyConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = yaml.safe_load(path_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> JustifyConfig:
        """Create a validated config from `LINEJUSTIFY_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        truncate_value = normalize_optional_string(env_map.get("LINEJUSTIFY_TRUNCATE"))
        config = JustifyConfig(
            width=parse_optional_positive_int(
                env_map.get("LINEJUSTIFY_WIDTH"), "LINEJUSTIFY_WIDTH"
            ),
            height=parse_optional_positive_int(
                env_map.get("LINEJUSTIFY_HEIGHT"), "LINEJUSTIFY_HEIGHT"
            ),
            truncate=(
                parse_required_boolean(truncate_value, "LINEJUSTIFY_TRUNCATE")
                if truncate_value is not None
                else False
            ),
            truncate_char=_optional_raw_char(env_map.get("LINEJUSTIFY_TRUNCATE_CHAR"))
            or _DEFAULT_TRUNCATE_CHAR,
            log_level=(
                normalize_optional_string(env_map.get("LINEJUSTIFY_LOG_LEVEL"))
                or _DEFAULT_LOG_LEVEL
            ).upper(),
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> JustifyConfig:
        """Build a validated config from a parsed mapping payload."""

        unknown_keys = sorted(
            str(key) for key in payload if key not in ConfigLoader._SUPPORTED_YAML_KEYS
        )
        if unknown_keys:
            raise ValueError(
                f"{source_label} contains unsupported keys: {', '.join(unknown_keys)}."
            )

        truncate = payload.get("truncate")
        if truncate is not None and parse_permissive_boolean(truncate) is None:
            raise ValueError(
                f"{source_label}: `truncate` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )

        log_level = normalize_optional_string(payload.get("log_level")) or _DEFAULT_LOG_LEVEL

        config = JustifyConfig(
            width=parse_optional_positive_int(payload.get("width"), "width"),
            height=parse_optional_positive_int(payload.get("height"), "height"),
            truncate=bool(parse_permissive_boolean(truncate)),
            truncate_char=_optional_raw_char(payload.get("truncate_char"))
            or _DEFAULT_TRUNCATE_CHAR,
            log_level=log_level.upper(),
        )
        config.validate()
        return config


def _optional_raw_char(value: object) -> str | None:
    """Return a truncation marker without stripping it, or `None` when unset.

    A single space is a valid marker, so only empty values count as unset.
    """

    if value is None:
        return None
    text = str(value)
    if not text:
        return None
    if len(text) > 1:
        text = text.strip()
    return text
