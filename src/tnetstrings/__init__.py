"""tnetstrings: Tagged Netstring Codec

A Python library for the tagged netstring format: a self-describing,
length-prefixed encoding for byte strings, integers, floats, booleans, null,
lists and string-keyed maps.

Every value is framed as ``<length>:<payload><tag>``, where length is the
byte size of the payload and the trailing tag byte names its type
(``,`` bytes, ``#`` integer, ``^`` float, ``!`` boolean, ``~`` null,
``]`` list, ``}`` map). Lists and maps nest further tnetstrings inside
their payload.

Quick Start:
    >>> from tnetstrings import dump, parse
    >>> data = dump({"action": "deploy", "replicas": 3, "canary": True})
    >>> data
    b'49:6:action,6:deploy,8:replicas,1:3#6:canary,4:true!}'
    >>> parse(data)
    ({'action': b'deploy', 'replicas': 3, 'canary': True}, b'')

Several values can share one buffer; parse() returns what it did not consume:
    >>> parse(b"2:42#1:7#")
    (42, b'1:7#')
"""

from __future__ import annotations

from .codec import dump, dump_all, iterparse, loads, parse, parse_payload
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import (
    DecodeError,
    EncodeError,
    InvalidBoolean,
    InvalidData,
    InvalidKey,
    InvalidLength,
    InvalidNullPayload,
    InvalidNumber,
    InvalidPayloadType,
    NestingTooDeep,
    TNetStringError,
    TrailingData,
    TruncatedPayload,
    UnbalancedMap,
    UnserializableType,
)
from .models import Value

__version__ = "0.1.0"

__all__ = [
    # Core API
    "dump",
    "parse",
    "parse_payload",
    # Helpers
    "dump_all",
    "loads",
    "iterparse",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Value model
    "Value",
    # Exceptions
    "TNetStringError",
    "EncodeError",
    "UnserializableType",
    "DecodeError",
    "InvalidData",
    "InvalidLength",
    "TruncatedPayload",
    "TrailingData",
    "InvalidPayloadType",
    "InvalidNullPayload",
    "UnbalancedMap",
    "InvalidNumber",
    "InvalidKey",
    "InvalidBoolean",
    "NestingTooDeep",
    # Version
    "__version__",
]
