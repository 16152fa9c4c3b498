# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Value model and generic encode/decode.

Each supported kind of item is its own dataclass, so a value only ever
holds the payload of its kind:

    >>> from cborlite import TextString, encode, decode
    >>> encode(TextString("hi"))
    b'bhi'
    >>> decode(b"\\x38\\xff")
    (NegativeInt(value=-256), 2)
"""

from dataclasses import dataclass
from typing import ClassVar, List, Tuple, Union

from .errors import InputTooShort, InvalidMajorType, TrailingData
from .header import UINT64_MAX, MajorType, decode_header, encode_header_into, header_width
from .integer import decode_uint
from .string import MAX_STRING_LENGTH, decode_bytes, decode_text


def _check_int(value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, not {type(value).__name__}")


@dataclass(frozen=True)
class UnsignedInt:
    """Unsigned integer (major type 0)."""
    value: int
    major_type: ClassVar[MajorType] = MajorType.UNSIGNED_INT

    def __post_init__(self):
        _check_int(self.value)
        if not 0 <= self.value <= UINT64_MAX:
            raise ValueError(f"Unsigned integer out of range: {self.value}")


@dataclass(frozen=True)
class NegativeInt:
    """Negative integer (major type 1), -2**64 up to -1."""
    value: int
    major_type: ClassVar[MajorType] = MajorType.NEGATIVE_INT

    def __post_init__(self):
        _check_int(self.value)
        if not -UINT64_MAX - 1 <= self.value <= -1:
            raise ValueError(f"Negative integer out of range: {self.value}")

    @property
    def magnitude(self) -> int:
        return -1 - self.value


@dataclass(frozen=True)
class ByteString:
    """Byte string (major type 2)."""
    value: bytes
    major_type: ClassVar[MajorType] = MajorType.BYTE_STRING

    def __post_init__(self):
        if not isinstance(self.value, bytes):
            raise TypeError(f"Expected bytes, not {type(self.value).__name__}")
        if len(self.value) > MAX_STRING_LENGTH:
            raise ValueError(f"String too long: {len(self.value)} bytes")


@dataclass(frozen=True)
class TextString:
    """Text string (major type 3)."""
    value: str
    major_type: ClassVar[MajorType] = MajorType.TEXT_STRING

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"Expected str, not {type(self.value).__name__}")

    @property
    def payload(self) -> bytes:
        return self.value.encode("utf-8", "surrogateescape")


# Type alias for any value
Value = Union[UnsignedInt, NegativeInt, ByteString, TextString]


def from_python(obj) -> Value:
    """
    Wrap a plain Python object in the matching value type.

    Args:
        obj: int, bytes-like object or str

    Returns:
        UnsignedInt, NegativeInt, ByteString or TextString

    Raises:
        TypeError: If obj has no CBOR counterpart here (bool included)
    """
    if isinstance(obj, bool):
        raise TypeError("Booleans are not supported")
    if isinstance(obj, int):
        return UnsignedInt(obj) if obj >= 0 else NegativeInt(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return ByteString(bytes(obj))
    if isinstance(obj, str):
        return TextString(obj)
    raise TypeError(f"Unsupported type: {type(obj).__name__}")


def to_python(value: Value):
    """Return the plain payload of a value."""
    return value.value


def _form(value: Value) -> Tuple[MajorType, int, bytes]:
    """Return (major type, magnitude, payload) for a value."""
    if isinstance(value, UnsignedInt):
        return MajorType.UNSIGNED_INT, value.value, b""
    if isinstance(value, NegativeInt):
        return MajorType.NEGATIVE_INT, value.magnitude, b""
    if isinstance(value, ByteString):
        return MajorType.BYTE_STRING, len(value.value), value.value
    if isinstance(value, TextString):
        payload = value.payload
        return MajorType.TEXT_STRING, len(payload), payload
    raise TypeError(f"Not a CBOR value: {type(value).__name__}")


def encoded_size(value: Value) -> int:
    """Number of bytes encode(value) produces."""
    _, magnitude, payload = _form(value)
    return header_width(magnitude) + len(payload)


def encode_into(value: Value, out) -> int:
    """
    Encode a value into a buffer of exactly encoded_size(value) bytes.

    Returns:
        Number of bytes written
    """
    major_type, magnitude, payload = _form(value)
    width = encode_header_into(out, major_type, magnitude, len(payload))
    out[width:] = payload
    return len(out)


def encode(value: Value) -> bytes:
    """Encode a value."""
    out = bytearray(encoded_size(value))
    encode_into(value, out)
    return bytes(out)


def decode(data: bytes, offset: int = 0, strict: bool = False) -> Tuple[Value, int]:
    """
    Decode one item.

    Args:
        data: Bytes containing the item
        offset: Starting offset in data
        strict: Reject non-canonical headers

    Returns:
        Tuple of (decoded value, new offset after the item)

    Raises:
        InvalidMajorType: For arrays, maps, tags, floats and simple values
        DecodeError: If the item is malformed or truncated
    """
    if offset >= len(data):
        raise InputTooShort("Item decode: unexpected end of data")

    major_type = data[offset] >> 5

    if major_type == MajorType.UNSIGNED_INT:
        number, end = decode_uint(data, offset, strict)
        return UnsignedInt(number), end

    if major_type == MajorType.NEGATIVE_INT:
        _, magnitude, width = decode_header(
            data, offset, major_types=(MajorType.NEGATIVE_INT,), strict=strict
        )
        return NegativeInt(-1 - magnitude), offset + width

    if major_type == MajorType.BYTE_STRING:
        payload, end = decode_bytes(data, offset=offset, strict=strict)
        return ByteString(payload), end

    if major_type == MajorType.TEXT_STRING:
        text, end = decode_text(data, offset=offset, strict=strict)
        return TextString(text), end

    raise InvalidMajorType(f"Unsupported major type {major_type} at offset {offset}")


def decode_one(data: bytes, strict: bool = False) -> Value:
    """
    Decode a buffer holding exactly one item.

    Raises:
        TrailingData: If bytes remain after the item
    """
    value, end = decode(data, 0, strict)
    if end != len(data):
        raise TrailingData(f"{len(data) - end} bytes after item")
    return value


def decode_all(data: bytes, strict: bool = False) -> List[Value]:
    """Decode a buffer holding a sequence of items."""
    values = []
    offset = 0
    while offset < len(data):
        value, offset = decode(data, offset, strict)
        values.append(value)
    return values
