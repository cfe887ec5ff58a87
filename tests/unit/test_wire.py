"""
Unit tests for the wire encoding of versions.

Tests cover:
- vint byte layout
- Signed 32-bit handling
- Truncated and overlong input
- Version read/write through streams
"""

import io

import pytest

from server.relver.errors import WireFormatError
from server.relver.version.companion import COMPANION_7_5_0
from server.relver.version.declared import DECLARED_VERSIONS, V_6_5_4, V_7_0_2
from server.relver.version.resolver import from_id
from server.relver.version.wire import (
    read_version,
    read_vint,
    version_from_bytes,
    version_to_bytes,
    write_version,
    write_vint,
)


def encode_vint(value):
    out = io.BytesIO()
    write_vint(value, out)
    return out.getvalue()


class TestVint:
    """Tests for write_vint/read_vint."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, b"\x00"),
            (1, b"\x01"),
            (127, b"\x7f"),
            (128, b"\x80\x01"),
            (300, b"\xac\x02"),
        ],
    )
    def test_layout(self, value, expected):
        assert encode_vint(value) == expected
        assert read_vint(io.BytesIO(expected)) == value

    def test_negative_takes_five_bytes(self):
        data = encode_vint(-1)

        assert data == b"\xff\xff\xff\xff\x0f"
        assert read_vint(io.BytesIO(data)) == -1

    def test_reads_only_its_bytes(self):
        stream = io.BytesIO(b"\xac\x02\x05")

        assert read_vint(stream) == 300
        assert read_vint(stream) == 5

    def test_truncated(self):
        with pytest.raises(WireFormatError, match="ended after 1 byte"):
            read_vint(io.BytesIO(b"\x80"))

    def test_empty_stream(self):
        with pytest.raises(WireFormatError):
            read_vint(io.BytesIO(b""))

    def test_too_long(self):
        with pytest.raises(WireFormatError, match="longer than 5 bytes"):
            read_vint(io.BytesIO(b"\x80\x80\x80\x80\x80\x01"))

    def test_overflow(self):
        with pytest.raises(WireFormatError, match="does not fit in 32 bits"):
            read_vint(io.BytesIO(b"\xff\xff\xff\xff\x7f"))


class TestVersionWire:
    """Tests for version read/write."""

    def test_declared_versions_resolve_to_constants(self):
        for version in DECLARED_VERSIONS:
            assert version_from_bytes(version_to_bytes(version)) is version

    def test_stream_round_trip(self):
        out = io.BytesIO()
        write_version(V_6_5_4, out)
        write_version(V_7_0_2, out)

        inp = io.BytesIO(out.getvalue())

        assert read_version(inp) is V_6_5_4
        assert read_version(inp) is V_7_0_2

    def test_undeclared_version(self):
        """Unknown ids from newer nodes still resolve."""
        version = version_from_bytes(version_to_bytes(from_id(6050599)))

        assert version.id == 6050599
        assert version.companion == COMPANION_7_5_0

    def test_size(self):
        assert len(version_to_bytes(V_7_0_2)) == 4

    def test_negative_id_rejected(self):
        """A signed vint below zero is not a version id."""
        with pytest.raises(WireFormatError, match="Negative version id -1"):
            version_from_bytes(encode_vint(-1))
