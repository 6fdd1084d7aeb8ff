"""Typed records used by linejustify."""

from .datatypes import BlockOptions, LineReport

__all__ = ["BlockOptions", "LineReport"]
