"""tnetstring decoder.

This module provides the parse() function that reads one tnetstring from the
front of a byte buffer and returns the decoded value together with the
unconsumed remainder, plus helpers built on it for whole-buffer decoding.

Decoding works on absolute offsets into a single buffer instead of slicing
at every level. Each nested frame is bounded by its parent's payload, so a
list or map can never read past its own declared length.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from typing import Any

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import (
    DecodeError,
    InvalidBoolean,
    InvalidData,
    InvalidKey,
    InvalidLength,
    InvalidNullPayload,
    InvalidNumber,
    InvalidPayloadType,
    NestingTooDeep,
    TrailingData,
    TruncatedPayload,
    UnbalancedMap,
)
from ..log import get_hexdump, logger
from ..models.value import Value, to_text
from .tags import (
    INT64_MAX,
    INT64_MIN,
    LENGTH_SEPARATOR,
    TAG_BOOLEAN,
    TAG_BYTES,
    TAG_FLOAT,
    TAG_INTEGER,
    TAG_LIST,
    TAG_MAP,
    TAG_NULL,
)

_INTEGER_RE = re.compile(rb"-?[0-9]+")


def parse(data: bytes | bytearray | memoryview, *, config: CodecConfig | None = None) -> tuple[Value, bytes]:
    """Decode one tnetstring from the front of *data*.

    Args:
        data: Buffer starting with a tnetstring; may hold more after it
        config: Codec settings (defaults to DEFAULT_CONFIG)

    Returns:
        Tuple of (value, remainder), where remainder is every byte after the
        decoded frame

    Raises:
        InvalidData: If data is empty, or the frame is malformed or truncated
        InvalidPayloadType: If the type tag is unknown
        InvalidNullPayload: If a null carries a payload
        UnbalancedMap: If a map has a key without a value
        InvalidNumber: If an integer or float payload is not valid number text
        InvalidKey: If key_errors is "strict" and a map key is not valid text
        InvalidBoolean: If strict_booleans is set and a boolean is malformed
        NestingTooDeep: If max_depth is exceeded, or nesting is deeper than
            the interpreter recursion limit

    Examples:
        ```python
        from tnetstrings import parse

        parse(b"3:foo,")                  # (b"foo", b"")
        parse(b"12:3:foo,3:bar,}")        # ({"foo": b"bar"}, b"")

        value, rest = parse(b"2:42#1:7#")  # (42, b"1:7#")
        value, rest = parse(rest)          # (7, b"")
        ```
    """
    cfg = config or DEFAULT_CONFIG
    buf = bytes(data)
    value, end = _decode_one(buf, 0, cfg)
    logger.debug("Decoded %s from %d of %d bytes", type(value).__name__, end, len(buf))
    return value, buf[end:]


def parse_payload(data: bytes | bytearray | memoryview) -> tuple[bytes, bytes, bytes]:
    """Split the first frame of *data* without interpreting its payload.

    Args:
        data: Buffer starting with a tnetstring

    Returns:
        Tuple of (payload, tag, remainder)

    Raises:
        InvalidData: If data is empty, or the frame is malformed or truncated

    Example:
        >>> parse_payload(b"3:foo,2:42#")
        (b'foo', b',', b'2:42#')
    """
    buf = bytes(data)
    start, end, tag, following = _read_frame(buf, 0, len(buf))
    return buf[start:end], tag, buf[following:]


def loads(data: bytes | bytearray | memoryview, *, config: CodecConfig | None = None) -> Value:
    """Decode a buffer holding exactly one tnetstring.

    Raises:
        TrailingData: If bytes remain after the value
        DecodeError: For any error parse() can raise
    """
    cfg = config or DEFAULT_CONFIG
    buf = bytes(data)
    value, end = _decode_one(buf, 0, cfg)
    if end != len(buf):
        raise TrailingData(f"{len(buf) - end} bytes of trailing data after value", end)
    return value


def iterparse(
    data: bytes | bytearray | memoryview, *, config: CodecConfig | None = None
) -> Iterator[Value]:
    """Decode every tnetstring in a buffer of concatenated values.

    This is the same as calling parse() repeatedly on each remainder until it
    is empty, without copying the remainder each time.

    Args:
        data: Buffer holding zero or more concatenated tnetstrings
        config: Codec settings (defaults to DEFAULT_CONFIG)

    Yields:
        Decoded values, in order

    Example:
        >>> list(iterparse(b"3:foo,4:true!3:313#"))
        [b'foo', True, 313]
    """
    cfg = config or DEFAULT_CONFIG
    buf = bytes(data)
    pos = 0
    while pos < len(buf):
        value, pos = _decode_one(buf, pos, cfg)
        yield value


def _decode_one(buf: bytes, pos: int, cfg: CodecConfig) -> tuple[Value, int]:
    """Decode the value at *pos*, logging byte context on failure."""
    try:
        try:
            return _parse_value(buf, pos, len(buf), cfg, 0)
        except RecursionError as err:
            raise NestingTooDeep("Nesting exceeds the interpreter recursion limit", pos) from err
    except DecodeError as e:
        if e.offset is not None:
            logger.debug("Decode failed: %s\n%s", e, get_hexdump(buf, e.offset))
        raise


def _read_frame(buf: bytes, pos: int, limit: int) -> tuple[int, int, bytes, int]:
    """Locate the frame starting at *pos*, never looking past *limit*.

    Returns:
        Tuple of (payload_start, payload_end, tag, next_position)
    """
    if pos >= limit:
        raise InvalidData("Invalid data: expected a tnetstring, got empty input", pos)

    colon = buf.find(LENGTH_SEPARATOR, pos, limit)
    if colon < 0:
        raise InvalidLength(f"Missing ':' after length prefix at offset {pos}", pos)

    prefix = buf[pos:colon]
    if not prefix.isdigit():
        raise InvalidLength(f"Invalid length prefix {prefix!r} at offset {pos}", pos)

    try:
        length = int(prefix)
    except ValueError as err:
        # More digits than int() accepts
        raise InvalidLength(f"Length prefix too long at offset {pos}", pos) from err
    start = colon + 1
    end = start + length
    if end > limit:
        raise TruncatedPayload(
            f"Payload declares {length} bytes but only {limit - start} remain", start
        )
    if end == limit:
        raise TruncatedPayload(f"Missing type tag after {length}-byte payload", end)

    return start, end, buf[end : end + 1], end + 1


def _parse_value(buf: bytes, pos: int, limit: int, cfg: CodecConfig, depth: int) -> tuple[Value, int]:
    """Decode the frame at *pos* and interpret it by its tag.

    Args:
        buf: Whole input buffer
        pos: Offset of the frame's length prefix
        limit: Offset the frame must end before (enclosing payload end)
        cfg: Codec settings
        depth: Number of enclosing lists/maps

    Returns:
        Tuple of (value, offset just past the frame)
    """
    start, end, tag, following = _read_frame(buf, pos, limit)

    if tag == TAG_BYTES:
        return buf[start:end], following

    if tag == TAG_INTEGER:
        return _parse_integer(buf[start:end], start), following

    if tag == TAG_FLOAT:
        return _parse_float(buf[start:end], start), following

    if tag == TAG_BOOLEAN:
        return _parse_boolean(buf[start:end], start, cfg), following

    if tag == TAG_NULL:
        if end != start:
            raise InvalidNullPayload(
                f"Payload must be 0 length for null, got {end - start} bytes", start
            )
        return None, following

    if tag == TAG_LIST:
        return _parse_list(buf, start, end, cfg, depth + 1), following

    if tag == TAG_MAP:
        return _parse_map(buf, start, end, cfg, depth + 1), following

    raise InvalidPayloadType(f"Invalid payload type: {tag!r}", end)


def _parse_integer(text: bytes, offset: int) -> int:
    if _INTEGER_RE.fullmatch(text) is None:
        raise InvalidNumber(f"Invalid integer payload {text!r}", offset)
    try:
        value = int(text)
    except ValueError as err:
        raise InvalidNumber(f"Integer payload too long ({len(text)} digits)", offset) from err
    if value < INT64_MIN or value > INT64_MAX:
        raise InvalidNumber(f"Integer {value} out of signed 64-bit range", offset)
    return value


def _parse_float(text: bytes, offset: int) -> float:
    # float() tolerates padding and digit separators, the wire format does not
    if not text or text != text.strip() or b"_" in text:
        raise InvalidNumber(f"Invalid float payload {text!r}", offset)
    try:
        return float(text)
    except ValueError as err:
        raise InvalidNumber(f"Invalid float payload {text!r}", offset) from err


def _parse_boolean(text: bytes, offset: int, cfg: CodecConfig) -> bool:
    # Anything but b"true" is False unless strict_booleans is set
    if cfg.strict_booleans and text not in (b"true", b"false"):
        raise InvalidBoolean(f"Invalid boolean payload {text!r}", offset)
    return text == b"true"


def _check_depth(depth: int, offset: int, cfg: CodecConfig) -> None:
    if cfg.max_depth is not None and depth > cfg.max_depth:
        raise NestingTooDeep(f"Nesting depth {depth} exceeds max_depth={cfg.max_depth}", offset)


def _parse_list(buf: bytes, start: int, end: int, cfg: CodecConfig, depth: int) -> list[Value]:
    _check_depth(depth, start, cfg)
    items: list[Value] = []
    pos = start
    while pos < end:
        value, pos = _parse_value(buf, pos, end, cfg, depth)
        items.append(value)
    return items


def _parse_map(buf: bytes, start: int, end: int, cfg: CodecConfig, depth: int) -> dict[str, Value]:
    _check_depth(depth, start, cfg)
    result: dict[str, Value] = {}
    pos = start
    while pos < end:
        key_offset = pos
        key, pos = _parse_value(buf, pos, end, cfg, depth)
        if pos >= end:
            raise UnbalancedMap(f"Unbalanced map: key {key!r} has no value", key_offset)
        value, pos = _parse_value(buf, pos, end, cfg, depth)
        result[_coerce_key(key, key_offset, cfg)] = value
    return result


def _coerce_key(key: Any, offset: int, cfg: CodecConfig) -> str:
    try:
        text = to_text(key, cfg)
    except UnicodeDecodeError as err:
        raise InvalidKey(f"Can't decode map key {key!r} as {cfg.encoding}", offset) from err
    return sys.intern(text) if cfg.intern_keys else text
