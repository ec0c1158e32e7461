"""Exception hierarchy for tnetstrings.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from TNetStringError for easy catching of any
tnetstrings-specific error.
"""

from __future__ import annotations


class TNetStringError(Exception):
    """Base exception for all tnetstrings errors."""

    pass


class EncodeError(TNetStringError):
    """Raised when encoding a value fails."""

    pass


class UnserializableType(EncodeError):
    """Raised when a value cannot be represented as a tnetstring.

    Examples:
        - Object whose type has no text conversion of its own (set, object())
        - Integer outside the signed 64-bit range
        - Nesting deeper than the configured max_depth
    """

    pass


class DecodeError(TNetStringError):
    """Raised when decoding tnetstring data fails.

    Attributes:
        offset: Byte offset in the top-level input where the problem was found,
            or None if unknown
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class InvalidData(DecodeError):
    """Raised when the input is empty where a tnetstring is expected."""

    pass


class InvalidLength(InvalidData):
    """Raised when the length prefix is missing or is not a decimal number.

    Examples:
        - No ':' separator in the input
        - Length prefix containing a sign, spaces or other non-digits
    """

    pass


class TruncatedPayload(InvalidData):
    """Raised when the input ends before the payload or the type tag."""

    pass


class TrailingData(InvalidData):
    """Raised by loads() when bytes remain after the decoded value."""

    pass


class InvalidPayloadType(DecodeError):
    """Raised when the type tag is not one of , # ^ ! ~ ] }."""

    pass


class InvalidNullPayload(DecodeError):
    """Raised when a null (~) carries a non-empty payload."""

    pass


class UnbalancedMap(DecodeError):
    """Raised when a map payload ends after a key with no value."""

    pass


class InvalidNumber(DecodeError):
    """Raised when a # or ^ payload is not valid number text."""

    pass


class InvalidBoolean(DecodeError):
    """Raised when a ! payload is neither 'true' nor 'false' (strict mode only)."""

    pass


class NestingTooDeep(DecodeError):
    """Raised when composites are nested too deeply to decode.

    Examples:
        - Nesting deeper than the configured max_depth
        - Nesting deeper than the interpreter recursion limit
    """

    pass


class InvalidKey(DecodeError):
    """Raised when map key bytes cannot be decoded with the configured encoding.

    Only raised with a strict key_errors handler; the default surrogateescape
    handler accepts any key bytes.
    """

    pass
