# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for byte/text string encoding/decoding."""

import pytest
from cborlite.errors import (
    InputTooLong,
    InputTooShort,
    InvalidAdditionalInfo,
    InvalidMajorType,
    LengthMismatch,
    NonCanonicalHeader,
)
from cborlite.string import (
    bytes_size,
    decode_bytes,
    decode_text,
    encode_bytes,
    encode_bytes_into,
    encode_string_into,
    encode_text,
    encode_text_into,
)


class TestEncodeBytes:
    """Tests for encode_bytes function."""

    def test_empty(self):
        """Empty byte string is a bare header."""
        assert encode_bytes(b"") == b"\x40"

    def test_short(self):
        """Short payload follows a one-byte header."""
        assert encode_bytes(b"\x01\x02\x03\x04") == b"\x44\x01\x02\x03\x04"

    def test_23_and_24_bytes(self):
        """Header grows at 24 bytes of payload."""
        assert encode_bytes(b"\xaa" * 23)[:1] == b"\x57"
        assert encode_bytes(b"\xaa" * 24)[:2] == b"\x58\x18"

    def test_large(self):
        """Payload of 65536 bytes uses a four-byte length."""
        data = bytes(range(256)) * 256
        encoded = encode_bytes(data)
        assert encoded[:5] == b"\x5a\x00\x01\x00\x00"
        assert encoded[5:] == data

    def test_bytes_like(self):
        """bytearray and memoryview are accepted."""
        assert encode_bytes(bytearray(b"\x00\xff")) == b"\x42\x00\xff"
        assert encode_bytes(memoryview(b"ab")) == b"\x42ab"

    def test_str_raises(self):
        """str must go through encode_text."""
        with pytest.raises(TypeError):
            encode_bytes("abc")


class TestEncodeText:
    """Tests for encode_text function."""

    def test_empty(self):
        """Empty text string."""
        assert encode_text("") == b"\x60"

    def test_ascii(self):
        """ASCII text."""
        assert encode_text("a") == b"\x61a"
        assert encode_text("IETF") == b"\x64IETF"

    def test_multibyte(self):
        """Length counts UTF-8 bytes, not characters."""
        assert encode_text("ü") == b"\x62\xc3\xbc"
        assert encode_text("水") == b"\x63\xe6\xb0\xb4"
        assert encode_text("\U00010151") == b"\x64\xf0\x90\x85\x91"

    def test_256_bytes(self):
        """A 256-byte string uses a two-byte length."""
        text = "x" * 256
        encoded = encode_text(text)
        assert encoded[:3] == b"\x79\x01\x00"
        assert encoded[3:] == text.encode("utf-8")
        assert len(encoded) == 259

    def test_non_str_raises(self):
        """Bytes must go through encode_bytes."""
        with pytest.raises(TypeError):
            encode_text(b"abc")


class TestEncodeInto:
    """Tests for the exact-size buffer variants."""

    def test_bytes_size(self):
        """bytes_size counts header and payload."""
        assert bytes_size(0) == 1
        assert bytes_size(23) == 24
        assert bytes_size(24) == 26
        assert bytes_size(256) == 259
        assert bytes_size(65536) == 65541

    def test_bytes_size_too_long(self):
        """Lengths beyond 32 bits are rejected."""
        with pytest.raises(ValueError, match="too long"):
            bytes_size(0x100000000)

    def test_bytes_into(self):
        """Byte string written into an exact buffer."""
        out = bytearray(bytes_size(3))
        assert encode_bytes_into(b"abc", out) == 4
        assert out == b"\x43abc"

    def test_text_into(self):
        """Text string written into a buffer sized for its UTF-8 form."""
        text = "grüß"
        out = bytearray(bytes_size(len(text.encode("utf-8"))))
        assert encode_text_into(text, out) == 7
        assert out == b"\x66gr\xc3\xbc\xc3\x9f"

    def test_wrong_size_raises(self):
        """Wrongly sized buffers are rejected without writing."""
        out = bytearray(b"\xee" * 5)
        with pytest.raises(ValueError, match="Output buffer must be 4 bytes"):
            encode_bytes_into(b"abc", out)
        assert out == b"\xee" * 5

    def test_non_string_major_type_raises(self):
        """Only major types 2 and 3 carry payloads."""
        with pytest.raises(ValueError, match="Not a string major type"):
            encode_string_into(0, b"a", bytearray(2))


class TestDecodeBytes:
    """Tests for decode_bytes function."""

    def test_empty(self):
        """Empty byte string."""
        assert decode_bytes(b"\x40") == (b"", 1)
        assert decode_bytes(b"\x40", length=0) == (b"", 1)

    def test_with_length(self):
        """Expected length matches."""
        assert decode_bytes(b"\x43abc", length=3) == (b"abc", 4)

    def test_text_major_type_accepted(self):
        """Text strings decode to their raw payload."""
        assert decode_bytes(b"\x62hi") == (b"hi", 3)

    def test_with_offset(self):
        """Decoding with non-zero starting offset."""
        data = b"\x00\x00\x42\xaa\xbb\x01"
        assert decode_bytes(data, offset=2) == (b"\xaa\xbb", 5)

    def test_returns_bytes(self):
        """Payload is returned as bytes for any buffer type."""
        payload, _ = decode_bytes(memoryview(b"\x41z"))
        assert isinstance(payload, bytes)
        assert payload == b"z"

    def test_length_mismatch_raises(self):
        """Header length differing from the expected length is rejected."""
        with pytest.raises(LengthMismatch, match="Expected 3 payload bytes, header says 5"):
            decode_bytes(b"\x45abcde", length=3)

    def test_length_mismatch_before_truncation(self):
        """Mismatch is reported even if the payload is also short."""
        with pytest.raises(LengthMismatch):
            decode_bytes(b"\x45abc", length=3)

    def test_empty_raises(self):
        """Empty data raises InputTooShort."""
        with pytest.raises(InputTooShort):
            decode_bytes(b"")

    def test_truncated_payload_raises(self):
        """Payload shorter than announced raises InputTooShort."""
        with pytest.raises(InputTooShort, match="need 5 payload bytes, have 2"):
            decode_bytes(b"\x45ab")

    def test_truncated_header_raises(self):
        """Truncated length raises InputTooShort."""
        with pytest.raises(InputTooShort):
            decode_bytes(b"\x59\x01")

    def test_64_bit_length_raises(self):
        """Additional info 27 raises InputTooLong."""
        with pytest.raises(InputTooLong):
            decode_bytes(b"\x5b\x00\x00\x00\x00\x00\x00\x00\x01a")

    def test_reserved_info_raises(self):
        """Additional info 31 (indefinite length) is not supported."""
        with pytest.raises(InvalidAdditionalInfo):
            decode_bytes(b"\x5f\x41a\xff")

    @pytest.mark.parametrize("data", [b"\x00", b"\x20", b"\x80", b"\xa0", b"\xf6"])
    def test_other_major_types_raise(self, data):
        """Integers and unsupported kinds are rejected."""
        with pytest.raises(InvalidMajorType):
            decode_bytes(data)

    def test_strict(self):
        """Strict mode rejects non-minimal lengths."""
        assert decode_bytes(b"\x58\x01a") == (b"a", 3)
        with pytest.raises(NonCanonicalHeader):
            decode_bytes(b"\x58\x01a", strict=True)


class TestDecodeText:
    """Tests for decode_text function."""

    def test_ascii(self):
        """ASCII text."""
        assert decode_text(b"\x64IETF") == ("IETF", 5)

    def test_multibyte(self):
        """Expected length is in bytes."""
        assert decode_text(b"\x63\xe6\xb0\xb4", length=3) == ("水", 4)

    def test_invalid_utf8_not_rejected(self):
        """Invalid UTF-8 is carried through without error."""
        text, end = decode_text(b"\x62\xff\xfe")
        assert end == 3
        assert encode_text(text) == b"\x62\xff\xfe"

    def test_byte_string_major_type_accepted(self):
        """Byte strings holding UTF-8 decode as text."""
        assert decode_text(b"\x42ok") == ("ok", 3)

    def test_length_mismatch_raises(self):
        """Expected length differs."""
        with pytest.raises(LengthMismatch):
            decode_text(b"\x62ab", length=1)


class TestStringRoundtrip:
    """Roundtrip tests for encode/decode."""

    @pytest.mark.parametrize("length", [0, 1, 23, 24, 255, 256, 65535, 65536])
    def test_bytes_roundtrip(self, length):
        """Encode then decode returns original payload."""
        data = bytes(i & 0xFF for i in range(length))
        encoded = encode_bytes(data)
        assert decode_bytes(encoded, length=length, strict=True) == (data, len(encoded))

    @pytest.mark.parametrize("text", ["", "a", "été", "\U0001f600" * 10, "z" * 300])
    def test_text_roundtrip(self, text):
        """Encode then decode returns original text."""
        encoded = encode_text(text)
        size = len(text.encode("utf-8"))
        assert decode_text(encoded, length=size, strict=True) == (text, len(encoded))
