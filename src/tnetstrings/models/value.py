"""Value model shared by the encoder and decoder.

A tnetstring value is one of None, bool, int, float, bytes, a list of values
or a str-keyed dict of values. This module also holds the text conversion
rules used for map keys and for the string fallback of foreign objects.
"""

from __future__ import annotations

from typing import Dict, List, Union

from ..config import CodecConfig

Value = Union[None, bool, int, float, bytes, List["Value"], Dict[str, "Value"]]

BytesLike = (bytes, bytearray, memoryview)


def has_text_conversion(obj: object) -> bool:
    """Check whether the type of *obj* defines its own string conversion.

    Types that only inherit ``object.__str__`` (sets, functions, plain
    instances) would be rendered as their repr, which is not a meaningful
    value, so they are not serializable through the string fallback.

    Example:
        >>> from decimal import Decimal
        >>> has_text_conversion(Decimal("1.5"))
        True
        >>> has_text_conversion({1, 2})
        False
    """
    return type(obj).__str__ is not object.__str__


def to_text(value: object, config: CodecConfig) -> str:
    """Convert a value to the text used for map keys.

    Args:
        value: Key as given to the encoder, or as decoded from the wire
        config: Codec settings (encoding and key error handler for bytes)

    Returns:
        Text form of the key

    Raises:
        UnicodeDecodeError: If bytes cannot be decoded with config.encoding
            (only possible with a strict key_errors handler)
    """
    if isinstance(value, str):
        return value
    if isinstance(value, BytesLike):
        return bytes(value).decode(config.encoding, config.key_errors)
    # bool before int, bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    return str(value)
