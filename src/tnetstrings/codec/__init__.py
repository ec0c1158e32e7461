"""tnetstring codec.

This module provides encoding and decoding between Python values and the
tagged netstring format.
"""

from __future__ import annotations

from .decoder import iterparse, loads, parse, parse_payload
from .encoder import dump, dump_all

__all__ = [
    "dump",
    "dump_all",
    "parse",
    "parse_payload",
    "loads",
    "iterparse",
]
