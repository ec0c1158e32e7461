"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_values() -> list:
    """One value of every supported type, in encoding order."""
    return [
        b"foo",
        42,
        -7,
        3.1415,
        True,
        False,
        None,
        [b"a", 1, [2.5]],
        {"cat": b"meow", "nested": {"list": [None, True]}},
    ]


@pytest.fixture
def sample_stream() -> bytes:
    """Three concatenated tnetstrings."""
    return b"2:ok,4:true!3:313#"
