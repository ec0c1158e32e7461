"""tnetstring encoder.

This module provides the dump() function that converts a Python value to its
tnetstring representation. Scalars map to a single length-prefixed frame;
lists and maps are encoded recursively and wrapped in an outer frame whose
length is the byte size of the concatenated children.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import UnserializableType
from ..log import logger
from ..models.value import BytesLike, has_text_conversion, to_text
from .tags import (
    FALSE,
    INT64_MAX,
    INT64_MIN,
    NULL,
    TAG_BYTES,
    TAG_FLOAT,
    TAG_INTEGER,
    TAG_LIST,
    TAG_MAP,
    TRUE,
)


def dump(value: Any, *, config: CodecConfig | None = None) -> bytes:
    """Encode a value as a tnetstring.

    Values are dispatched on their Python type:

    - None, bool, int, float -> null, boolean, integer, float
    - bytes, bytearray, memoryview -> byte string
    - str -> byte string, encoded with ``config.encoding``
    - list, tuple -> list
    - any Mapping -> map, keys converted to text, in iteration order
    - anything else whose type defines ``__str__`` -> byte string of str(value)

    Args:
        value: Value to encode
        config: Codec settings (defaults to DEFAULT_CONFIG)

    Returns:
        tnetstring bytes

    Raises:
        UnserializableType: If the value (or a nested value) cannot be encoded,
            or the value contains itself

    Examples:
        ```python
        from tnetstrings import dump

        dump(None)                      # b"0:~"
        dump("foo")                     # b"3:foo,"
        dump([b"foo", b"bar", b"baz"])  # b"18:3:foo,3:bar,3:baz,]"
        dump({"foo": b"bar"})           # b"12:3:foo,3:bar,}"
        ```
    """
    cfg = config or DEFAULT_CONFIG
    try:
        encoded = _dump_value(value, cfg, 0)
    except RecursionError as err:
        # Self-referencing containers recurse until the interpreter limit
        raise UnserializableType(
            f"Can't serialize {type(value).__name__}: nested too deeply or contains itself"
        ) from err
    logger.debug("Encoded %s into %d bytes", type(value).__name__, len(encoded))
    return encoded


def dump_all(values: Iterable[Any], *, config: CodecConfig | None = None) -> bytes:
    """Encode several values back to back.

    The result can be decoded one value at a time with parse(), or all at
    once with iterparse().

    Args:
        values: Values to encode, in order
        config: Codec settings (defaults to DEFAULT_CONFIG)

    Returns:
        Concatenated tnetstrings
    """
    return b"".join(dump(value, config=config) for value in values)


def _frame(payload: bytes, tag: bytes) -> bytes:
    """Wrap a payload as ``<length>:<payload><tag>``."""
    return b"%d:%b%b" % (len(payload), payload, tag)


def _dump_value(value: Any, cfg: CodecConfig, depth: int) -> bytes:
    """Encode a single value.

    Args:
        value: Value to encode
        cfg: Codec settings
        depth: Number of enclosing lists/maps

    Raises:
        UnserializableType: If value is outside the supported types
    """
    if value is None:
        return NULL

    # bool must be checked before int
    if isinstance(value, bool):
        return TRUE if value else FALSE

    if isinstance(value, int):
        if value < INT64_MIN or value > INT64_MAX:
            raise UnserializableType(f"Integer {value} out of signed 64-bit range")
        return _frame(b"%d" % value, TAG_INTEGER)

    if isinstance(value, float):
        return _frame(repr(float(value)).encode("ascii"), TAG_FLOAT)

    if isinstance(value, BytesLike):
        return _frame(bytes(value), TAG_BYTES)

    if isinstance(value, str):
        return _frame(_encode_text(value, cfg), TAG_BYTES)

    if isinstance(value, (list, tuple)):
        _check_depth(depth + 1, cfg)
        payload = b"".join(_dump_value(item, cfg, depth + 1) for item in value)
        return _frame(payload, TAG_LIST)

    if isinstance(value, Mapping):
        _check_depth(depth + 1, cfg)
        parts: list[bytes] = []
        for key, item in value.items():
            parts.append(_dump_key(key, cfg))
            parts.append(_dump_value(item, cfg, depth + 1))
        return _frame(b"".join(parts), TAG_MAP)

    # Foreign objects fall back to their own text form
    if has_text_conversion(value):
        return _frame(_encode_text(str(value), cfg), TAG_BYTES)

    raise UnserializableType(f"Can't serialize object of type {type(value).__name__}")


def _dump_key(key: Any, cfg: CodecConfig) -> bytes:
    """Encode a map key, always as a byte string."""
    if isinstance(key, BytesLike):
        return _frame(bytes(key), TAG_BYTES)
    if not isinstance(key, (str, int, float)) and key is not None and not has_text_conversion(key):
        raise UnserializableType(f"Can't use object of type {type(key).__name__} as a map key")
    return _frame(_encode_text(to_text(key, cfg), cfg, cfg.key_errors), TAG_BYTES)


def _encode_text(text: str, cfg: CodecConfig, errors: str | None = None) -> bytes:
    try:
        return text.encode(cfg.encoding, errors or cfg.errors)
    except UnicodeEncodeError as err:
        raise UnserializableType(f"Can't encode text as {cfg.encoding}: {err}") from err


def _check_depth(depth: int, cfg: CodecConfig) -> None:
    if cfg.max_depth is not None and depth > cfg.max_depth:
        raise UnserializableType(f"Nesting depth {depth} exceeds max_depth={cfg.max_depth}")
