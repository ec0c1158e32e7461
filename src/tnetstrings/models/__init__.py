"""Value model for tnetstrings."""

from __future__ import annotations

from .value import Value, has_text_conversion, to_text

__all__ = [
    "Value",
    "has_text_conversion",
    "to_text",
]
