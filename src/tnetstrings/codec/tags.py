"""Type tags and numeric limits of the tnetstring format.

Every tnetstring ends with a single tag byte naming the type of its payload:

    ,  byte string     #  integer     ^  float
    !  boolean         ~  null        ]  list      }  map
"""

from __future__ import annotations

TAG_BYTES: bytes = b","
TAG_INTEGER: bytes = b"#"
TAG_FLOAT: bytes = b"^"
TAG_BOOLEAN: bytes = b"!"
TAG_NULL: bytes = b"~"
TAG_LIST: bytes = b"]"
TAG_MAP: bytes = b"}"

LENGTH_SEPARATOR: bytes = b":"

# Pre-encoded constants
NULL: bytes = b"0:~"
TRUE: bytes = b"4:true!"
FALSE: bytes = b"5:false!"

# Python ints are arbitrary-precision, the format's integers are signed 64-bit
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1
