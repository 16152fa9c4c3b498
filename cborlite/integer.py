# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Integer encoding/decoding (CBOR major types 0 and 1).

Unsigned integers are a bare header of major type 0. Negative integers
use major type 1 with the magnitude -1 - value, so -1 encodes as 0x20.
"""

from typing import Tuple

from .errors import IntegerOverflow
from .header import (
    UINT64_MAX,
    MajorType,
    decode_header,
    encode_header,
    encode_header_into,
    header_width,
)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _check_uint(value: int) -> None:
    if not isinstance(value, int):
        raise TypeError(f"Expected int, not {type(value).__name__}")
    if value < 0:
        raise ValueError("Cannot encode negative value as unsigned integer")
    if value > UINT64_MAX:
        raise ValueError(f"Value does not fit in 64 bits: {value}")


def _int_form(value: int) -> Tuple[MajorType, int]:
    """Return (major type, magnitude) for a signed 64-bit value."""
    if not isinstance(value, int):
        raise TypeError(f"Expected int, not {type(value).__name__}")
    if value < INT64_MIN or value > INT64_MAX:
        raise ValueError(f"Value outside int64 range: {value}")
    if value >= 0:
        return MajorType.UNSIGNED_INT, value
    return MajorType.NEGATIVE_INT, -1 - value


def uint_size(value: int) -> int:
    """Encoded size of an unsigned integer."""
    _check_uint(value)
    return header_width(value)


def int_size(value: int) -> int:
    """Encoded size of a signed integer."""
    _, magnitude = _int_form(value)
    return header_width(magnitude)


def encode_uint(value: int) -> bytes:
    """
    Encode an unsigned 64-bit integer.

    Args:
        value: Integer in 0..2**64-1

    Returns:
        Encoded bytes (1, 2, 3, 5 or 9 long)
    """
    _check_uint(value)
    return encode_header(MajorType.UNSIGNED_INT, value)


def encode_uint_into(value: int, out) -> int:
    """Encode an unsigned integer into a buffer of exactly uint_size(value) bytes."""
    _check_uint(value)
    return encode_header_into(out, MajorType.UNSIGNED_INT, value)


def encode_int(value: int) -> bytes:
    """
    Encode a signed 64-bit integer.

    Non-negative values share the unsigned representation.

    Args:
        value: Integer in -2**63..2**63-1

    Returns:
        Encoded bytes
    """
    major_type, magnitude = _int_form(value)
    return encode_header(major_type, magnitude)


def encode_int_into(value: int, out) -> int:
    """Encode a signed integer into a buffer of exactly int_size(value) bytes."""
    major_type, magnitude = _int_form(value)
    return encode_header_into(out, major_type, magnitude)


def decode_uint(data: bytes, offset: int = 0, strict: bool = False) -> Tuple[int, int]:
    """
    Decode an unsigned integer.

    Args:
        data: Bytes containing the encoded integer
        offset: Starting offset in data
        strict: Reject non-canonical headers

    Returns:
        Tuple of (decoded value, new offset after the item)

    Raises:
        InvalidMajorType: If the item is not an unsigned integer
        DecodeError: If the header is malformed or truncated
    """
    _, value, width = decode_header(
        data, offset, major_types=(MajorType.UNSIGNED_INT,), strict=strict
    )
    return value, offset + width


def decode_int(data: bytes, offset: int = 0, strict: bool = False) -> Tuple[int, int]:
    """
    Decode a signed 64-bit integer.

    Both major type 0 and major type 1 are accepted.

    Args:
        data: Bytes containing the encoded integer
        offset: Starting offset in data
        strict: Reject non-canonical headers

    Returns:
        Tuple of (decoded value, new offset after the item)

    Raises:
        InvalidMajorType: If the item is not an integer
        IntegerOverflow: If the value is outside the int64 range
        DecodeError: If the header is malformed or truncated
    """
    major_type, magnitude, width = decode_header(
        data,
        offset,
        major_types=(MajorType.UNSIGNED_INT, MajorType.NEGATIVE_INT),
        strict=strict,
    )

    if major_type == MajorType.NEGATIVE_INT:
        value = -1 - magnitude
    else:
        value = magnitude

    if value < INT64_MIN or value > INT64_MAX:
        raise IntegerOverflow(f"Value outside int64 range: {value}")

    return value, offset + width
