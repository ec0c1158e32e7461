#!/usr/bin/env python3
"""Basic usage example for tnetstrings.

This example demonstrates:
1. Encoding nested values to tnetstrings
2. Decoding them back, one value at a time
3. Streaming several values through one buffer
4. Tuning the codec with CodecConfig
"""

from __future__ import annotations

from tnetstrings import CodecConfig, DecodeError, dump, dump_all, iterparse, parse


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("tnetstrings Basic Usage Example")
    print("=" * 60)
    print()

    # Encode a message
    print("1. Encoding a status message...")
    status = {"host": "web-3", "load": 0.42, "healthy": True, "ports": [80, 443]}
    data = dump(status)
    print(f"   Value: {status}")
    print(f"   Encoded ({len(data)} bytes): {data!r}")
    print()

    # Decode it
    print("2. Decoding...")
    value, rest = parse(data)
    print(f"   Decoded: {value}")
    print(f"   Remainder: {rest!r}")
    print("   Note: text comes back as bytes, map keys as str")
    print()

    # Stream several values
    print("3. Streaming several values through one buffer...")
    stream = dump_all([b"hello", 42, None, [1.5, False]])
    print(f"   Stream: {stream!r}")
    for i, item in enumerate(iterparse(stream), 1):
        print(f"   Value {i}: {item!r}")
    print()

    # Custom configuration
    print("4. Guarding against hostile input...")
    config = CodecConfig(max_depth=4, strict_booleans=True)
    for sample in (b"4:true!", b"3:yes!", b"12:9:6:3:0:]]]]]"):
        try:
            decoded, _ = parse(sample, config=config)
            print(f"   {sample!r} -> {decoded!r}")
        except DecodeError as e:
            print(f"   {sample!r} rejected at offset {e.offset}: {e}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
