# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
CBOR item header encoding/decoding.

Every supported item starts with a header: one initial byte holding the
major type (top 3 bits) and the additional info (bottom 5 bits),
followed by 0, 1, 2, 4 or 8 big-endian magnitude bytes. The encoder
always picks the shortest form for a magnitude.
"""

import struct
from enum import IntEnum
from typing import Container, Optional, Tuple

from .errors import (
    InputTooLong,
    InputTooShort,
    InvalidAdditionalInfo,
    InvalidMajorType,
    NonCanonicalHeader,
)

UINT64_MAX = 0xFFFFFFFFFFFFFFFF

# Largest magnitude stored directly in the additional info bits
DIRECT_MAX = 23


class MajorType(IntEnum):
    """Major types supported by this codec."""
    UNSIGNED_INT = 0
    NEGATIVE_INT = 1
    BYTE_STRING = 2
    TEXT_STRING = 3

    def __str__(self) -> str:
        return self.name


class AdditionalInfo(IntEnum):
    """Additional info codes announcing trailing magnitude bytes."""
    UINT8 = 24
    UINT16 = 25
    UINT32 = 26
    UINT64 = 27

    def __str__(self) -> str:
        return self.name


# (largest magnitude, additional info, struct format), smallest first
_FORMS = (
    (0xFF, AdditionalInfo.UINT8, ">B"),
    (0xFFFF, AdditionalInfo.UINT16, ">H"),
    (0xFFFFFFFF, AdditionalInfo.UINT32, ">I"),
    (UINT64_MAX, AdditionalInfo.UINT64, ">Q"),
)

_FORMAT = {info: fmt for _, info, fmt in _FORMS}

# Smallest magnitude each form may carry in canonical encoding
_CANONICAL_MIN = {
    AdditionalInfo.UINT8: DIRECT_MAX + 1,
    AdditionalInfo.UINT16: 0x100,
    AdditionalInfo.UINT32: 0x10000,
    AdditionalInfo.UINT64: 0x100000000,
}


def _check_major_type(major_type: int) -> None:
    if not isinstance(major_type, int):
        raise TypeError(f"Major type must be int, not {type(major_type).__name__}")
    if not 0 <= major_type <= MajorType.TEXT_STRING:
        raise ValueError(f"Unsupported major type: {major_type}")


def _select_form(magnitude: int) -> Tuple[int, Optional[str]]:
    """Return (additional info, struct format) for a magnitude."""
    if not isinstance(magnitude, int):
        raise TypeError(f"Magnitude must be int, not {type(magnitude).__name__}")
    if magnitude < 0:
        raise ValueError("Cannot encode negative magnitude")
    if magnitude <= DIRECT_MAX:
        return magnitude, None
    for limit, info, fmt in _FORMS:
        if magnitude <= limit:
            return info, fmt
    raise ValueError(f"Magnitude does not fit in 64 bits: {magnitude}")


def header_width(magnitude: int) -> int:
    """
    Compute the canonical header size for a magnitude.

    Args:
        magnitude: Unsigned 64-bit value the header carries

    Returns:
        Header size in bytes (1, 2, 3, 5 or 9)
    """
    _, fmt = _select_form(magnitude)
    if fmt is None:
        return 1
    return 1 + struct.calcsize(fmt)


def encode_header(major_type: int, magnitude: int) -> bytes:
    """
    Encode a canonical header.

    Args:
        major_type: Major type (0-3)
        magnitude: Unsigned 64-bit value to carry

    Returns:
        Header bytes
    """
    out = bytearray(header_width(magnitude))
    encode_header_into(out, major_type, magnitude)
    return bytes(out)


def encode_header_into(out, major_type: int, magnitude: int,
                       payload_length: int = 0) -> int:
    """
    Write a canonical header at the start of a pre-sized buffer.

    The buffer must be exactly header_width(magnitude) + payload_length
    bytes long, so the header ends where the payload begins. Nothing is
    written if any argument is rejected.

    Args:
        out: Writable buffer (bytearray or memoryview)
        major_type: Major type (0-3)
        magnitude: Unsigned 64-bit value to carry
        payload_length: Number of payload bytes following the header

    Returns:
        Header size in bytes

    Raises:
        ValueError: If the major type, magnitude or buffer size is invalid
    """
    _check_major_type(major_type)
    info, fmt = _select_form(magnitude)
    width = 1 if fmt is None else 1 + struct.calcsize(fmt)

    if payload_length < 0:
        raise ValueError("Payload length cannot be negative")
    if len(out) != width + payload_length:
        raise ValueError(
            f"Output buffer must be {width + payload_length} bytes, got {len(out)}"
        )

    out[0] = (major_type << 5) | info
    if fmt is not None:
        struct.pack_into(fmt, out, 1, magnitude)
    return width


def decode_header(
    data: bytes,
    offset: int = 0,
    major_types: Optional[Container[int]] = None,
    max_info: int = AdditionalInfo.UINT64,
    strict: bool = False,
) -> Tuple[int, int, int]:
    """
    Decode a header.

    Non-minimal headers are accepted unless strict is set.

    Args:
        data: Bytes containing the header
        offset: Starting offset in data
        major_types: Accepted major types (None accepts any)
        max_info: Largest additional info code accepted before
            InputTooLong is raised
        strict: Reject headers that are not in canonical form

    Returns:
        Tuple of (major type, magnitude, header size)

    Raises:
        InputTooShort: If data ends inside the header
        InvalidMajorType: If the major type is not in major_types
        InvalidAdditionalInfo: If additional info is 28-31
        InputTooLong: If additional info exceeds max_info
        NonCanonicalHeader: If strict and the header is not minimal
    """
    if offset < 0:
        raise ValueError("Offset cannot be negative")
    if offset >= len(data):
        raise InputTooShort("Header decode: unexpected end of data")

    initial = data[offset]
    major_type = initial >> 5
    info = initial & 0x1F

    if major_types is not None and major_type not in major_types:
        raise InvalidMajorType(
            f"Unexpected major type {major_type} at offset {offset}"
        )

    if info <= DIRECT_MAX:
        return major_type, info, 1

    if info > AdditionalInfo.UINT64:
        raise InvalidAdditionalInfo(
            f"Reserved additional info {info} at offset {offset}"
        )
    if info > max_info:
        raise InputTooLong(f"Length with additional info {info} is too long")

    fmt = _FORMAT[info]
    size = struct.calcsize(fmt)
    if offset + 1 + size > len(data):
        raise InputTooShort(
            f"Header decode: need {1 + size} bytes at offset {offset}, "
            f"have {len(data) - offset}"
        )

    (magnitude,) = struct.unpack_from(fmt, data, offset + 1)

    if strict and magnitude < _CANONICAL_MIN[info]:
        raise NonCanonicalHeader(
            f"Magnitude {magnitude} encoded with additional info {info}"
        )

    return major_type, magnitude, 1 + size
