"""Tests for the framed container codec."""
import pytest

from walruspy.core.crypto.container import MAGIC, frame, unframe, is_framed
from walruspy.core.exceptions import FormatError


class TestFrame:
    """Test suite for frame()."""

    def test_layout(self):
        """Test magic, IV and payload are concatenated in order."""
        iv = bytes(range(12))
        result = frame(iv, b"payload")

        assert result == b"WAL" + iv + b"payload"

    def test_magic_bytes(self):
        """Test magic is 0x57 0x41 0x4C."""
        assert MAGIC == bytes([0x57, 0x41, 0x4C])

    def test_empty_payload(self):
        """Test framing with an empty payload."""
        iv = b"\x00" * 16
        assert len(frame(iv, b"")) == 3 + 16


class TestUnframe:
    """Test suite for unframe()."""

    @pytest.mark.parametrize("iv_length", [12, 16])
    def test_split(self, iv_length):
        """Test IV and payload are split at the right offsets."""
        iv = bytes(range(iv_length))
        iv_out, payload = unframe(frame(iv, b"ciphertext"), iv_length)

        assert iv_out == iv
        assert payload == b"ciphertext"

    def test_header_only(self):
        """Test minimal container gives empty payload."""
        iv_out, payload = unframe(b"WAL" + b"\x01" * 12, 12)

        assert iv_out == b"\x01" * 12
        assert payload == b""

    @pytest.mark.parametrize("iv_length", [12, 16])
    def test_too_short(self, iv_length):
        """Test input shorter than magic + IV is rejected."""
        with pytest.raises(FormatError, match="too short"):
            unframe(b"WAL" + b"\x00" * (iv_length - 1), iv_length)

    def test_ten_zero_bytes(self):
        """Test 10 zero bytes are rejected for both IV sizes."""
        for iv_length in (12, 16):
            with pytest.raises(FormatError):
                unframe(bytes(10), iv_length)

    def test_length_checked_before_magic(self):
        """Test short input with bad magic reports length."""
        with pytest.raises(FormatError, match="too short"):
            unframe(b"XYZ", 12)

    def test_bad_magic(self):
        """Test wrong magic bytes are rejected."""
        with pytest.raises(FormatError, match="magic"):
            unframe(b"WAX" + b"\x00" * 20, 12)

    def test_returns_bytes(self):
        """Test bytearray input gives bytes output."""
        iv_out, payload = unframe(bytearray(b"WAL" + b"\x02" * 12 + b"xy"), 12)

        assert isinstance(iv_out, bytes)
        assert isinstance(payload, bytes)


def test_is_framed():
    """Test magic detection."""
    assert is_framed(b"WAL\x00")
    assert not is_framed(b"WA")
    assert not is_framed(b"hello")
