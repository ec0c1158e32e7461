"""Unit tests for logging."""

from __future__ import annotations

import logging

import pytest

from tnetstrings import InvalidPayloadType, dump, parse
from tnetstrings.log import get_hexdump, logger


def test_logger_config() -> None:
    """Test the package logger has no handlers and inherits its level."""
    assert logger.name == "tnetstrings"
    assert not logger.handlers
    assert logger.level == logging.NOTSET


def test_get_hexdump_basic() -> None:
    """Test hex formatting around an offset."""
    data = b"\x01\x02\x03"
    dump_text = get_hexdump(data, pos=1, window=1)

    assert "01 02" in dump_text


def test_get_hexdump_boundaries() -> None:
    """Test the window is clipped at both ends."""
    data = b"\xaa\xbb\xcc"

    assert "aa" in get_hexdump(data, pos=0, window=1)
    assert "bb cc" in get_hexdump(data, pos=2, window=1)


def test_get_hexdump_empty() -> None:
    """Test empty input."""
    dump_text = get_hexdump(b"", pos=0)
    assert "offset 0" in dump_text


def test_get_hexdump_out_of_bounds_pos() -> None:
    """Test an offset past the end still shows the tail."""
    dump_text = get_hexdump(b"\x01", pos=10)
    assert "01" in dump_text


def test_decode_failure_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    """Test failed decodes log the byte context at DEBUG level only."""
    caplog.set_level(logging.DEBUG, logger="tnetstrings")

    with pytest.raises(InvalidPayloadType):
        parse(b"3:foo?")

    records = [r for r in caplog.records if r.name == "tnetstrings"]
    assert records
    assert all(r.levelno == logging.DEBUG for r in records)
    assert "context at offset 5" in caplog.text
    assert "66 6f 6f 3f" in caplog.text


def test_encode_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    """Test encodes log their size at DEBUG level."""
    caplog.set_level(logging.DEBUG, logger="tnetstrings")

    dump([1, 2])

    assert "Encoded list into 11 bytes" in caplog.text
