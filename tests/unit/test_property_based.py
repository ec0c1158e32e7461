"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from tnetstrings import DecodeError, dump, dump_all, iterparse, loads, parse
from tnetstrings.codec.tags import INT64_MAX, INT64_MIN

scalars = (
    st.none()
    | st.booleans()
    | st.integers(min_value=INT64_MIN, max_value=INT64_MAX)
    | st.floats(allow_nan=False)
    | st.binary(max_size=64)
)

values = st.recursive(
    scalars,
    lambda children: st.lists(children, max_size=5)
    | st.dictionaries(st.text(max_size=10), children, max_size=5),
    max_leaves=20,
)


class TestCodecProperties:
    """Property-based tests for the codec."""

    @given(value=values)
    def test_dump_parse_roundtrip(self, value: object) -> None:
        """Test parse(dump(v)) gives back v with nothing left over."""
        assert parse(dump(value)) == (value, b"")

    @given(value=values)
    def test_dump_deterministic(self, value: object) -> None:
        """Test encoding is deterministic."""
        assert dump(value) == dump(value)

    @given(value=values, trailer=st.binary(max_size=32))
    def test_parse_returns_remainder(self, value: object, trailer: bytes) -> None:
        """Test bytes after a value are returned untouched."""
        assert parse(dump(value) + trailer) == (value, trailer)

    @given(items=st.lists(values, max_size=5))
    def test_concatenation(self, items: list) -> None:
        """Test concatenated values decode in order."""
        data = dump_all(items)

        assert list(iterparse(data)) == items

        decoded = []
        rest = data
        while rest:
            value, rest = parse(rest)
            decoded.append(value)
        assert decoded == items

    @given(keys=st.lists(st.binary(max_size=16), max_size=5, unique=True))
    def test_any_key_bytes_roundtrip(self, keys: list) -> None:
        """Test maps with arbitrary key bytes decode and encode back unchanged."""
        data = dump({key: index for index, key in enumerate(keys)})

        value, rest = parse(data)

        assert rest == b""
        assert len(value) == len(keys)
        assert dump(value) == data

    @given(text=st.text())
    def test_text_length_prefix_counts_bytes(self, text: str) -> None:
        """Test str values are prefixed with their UTF-8 byte length."""
        encoded = text.encode("utf-8")

        assert dump(text) == b"%d:%b," % (len(encoded), encoded)
        assert loads(dump(text)) == encoded

    @given(data=st.binary(max_size=200))
    def test_arbitrary_input_only_raises_decode_errors(self, data: bytes) -> None:
        """Test garbage input never escapes as anything but DecodeError."""
        try:
            value, rest = parse(data)
        except DecodeError:
            return
        assert data.endswith(rest)
