"""Codec configuration.

This module provides the CodecConfig model that tunes how text is converted
to and from bytes and how strict the decoder is. The defaults reproduce the
plain tnetstring behavior, so most callers never need to build one.
"""

from __future__ import annotations

import codecs
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ErrorHandler = Literal["strict", "replace", "ignore", "surrogateescape", "backslashreplace"]


class CodecConfig(BaseModel):
    """Settings shared by dump() and parse().

    Attributes:
        encoding: Text encoding used for str values and map keys (default utf-8)
        errors: Codec error handler used with `encoding` for str values
            (default strict)
        key_errors: Codec error handler used with `encoding` for map keys
            (default surrogateescape, so any key bytes decode and re-encode
            unchanged; "strict" rejects keys that are not valid text)
        intern_keys: Intern decoded map keys with sys.intern (default True)
        strict_booleans: Reject ! payloads other than 'true'/'false' instead of
            decoding them as False (default False)
        max_depth: Maximum nesting of lists and maps, or None for no limit

    Examples:
        ```python
        from tnetstrings import CodecConfig, parse

        # Decode latin-1 keys and refuse malformed booleans
        config = CodecConfig(encoding="latin-1", strict_booleans=True)
        value, rest = parse(data, config=config)

        # Refuse payloads nested deeper than 32 levels
        guarded = CodecConfig(max_depth=32)
        ```
    """

    model_config = ConfigDict(
        # Instances are shared between threads
        frozen=True,
        # Forbid unknown settings
        extra="forbid",
    )

    encoding: str = "utf-8"
    errors: ErrorHandler = "strict"
    key_errors: ErrorHandler = "surrogateescape"
    intern_keys: bool = True
    strict_booleans: bool = False
    max_depth: Optional[int] = Field(default=None, ge=1)

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError as err:
            raise ValueError(f"Unknown text encoding: {value}") from err


DEFAULT_CONFIG = CodecConfig()
