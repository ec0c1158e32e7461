"""tnetstrings logger."""

from __future__ import annotations

import binascii
import logging

logger = logging.getLogger("tnetstrings")


def get_hexdump(data: bytes | bytearray | memoryview, pos: int, window: int = 16) -> str:
    """Return a hex dump of the bytes around offset *pos*."""
    start = max(0, min(pos, len(data)) - window)
    end = min(len(data), pos + window)
    chunk = bytes(data[start:end])

    hex_str = binascii.hexlify(chunk).decode("ascii")
    hex_str = " ".join(hex_str[i : i + 2] for i in range(0, len(hex_str), 2))

    return f"context at offset {pos} (bytes {start}-{end}):\n{hex_str}"
