# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Byte and text string encoding/decoding (CBOR major types 2 and 3).

A string is a header carrying the payload length followed by the
payload bytes. Lengths are limited to 32 bits.

Text payloads are not checked for well-formed UTF-8 on decode. Invalid
sequences are kept as lone surrogates (the "surrogateescape" handler),
and encode_text turns them back into the same bytes.
"""

from typing import Optional, Tuple, Union

from .errors import InputTooShort, LengthMismatch
from .header import (
    AdditionalInfo,
    MajorType,
    decode_header,
    encode_header_into,
    header_width,
)

MAX_STRING_LENGTH = 0xFFFFFFFF

_STRING_TYPES = (MajorType.BYTE_STRING, MajorType.TEXT_STRING)

BytesLike = Union[bytes, bytearray, memoryview]


def bytes_size(length: int) -> int:
    """Encoded size of a string with a payload of length bytes."""
    if length > MAX_STRING_LENGTH:
        raise ValueError(f"String too long: {length} bytes")
    return header_width(length) + length


def _text_payload(text: str) -> bytes:
    if not isinstance(text, str):
        raise TypeError(f"Expected str, not {type(text).__name__}")
    return text.encode("utf-8", "surrogateescape")


def _bytes_payload(data: BytesLike) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes-like object, not {type(data).__name__}")
    return bytes(data)


def encode_string_into(major_type: int, payload: bytes, out) -> int:
    """
    Write a header and payload into a buffer of exactly bytes_size(len(payload)).

    Returns:
        Number of bytes written
    """
    if major_type not in _STRING_TYPES:
        raise ValueError(f"Not a string major type: {major_type}")
    bytes_size(len(payload))
    width = encode_header_into(out, major_type, len(payload), len(payload))
    out[width:] = payload
    return len(out)


def _encode_string(major_type: int, payload: bytes) -> bytes:
    out = bytearray(bytes_size(len(payload)))
    encode_string_into(major_type, payload, out)
    return bytes(out)


def encode_bytes(data: BytesLike) -> bytes:
    """
    Encode a byte string.

    Args:
        data: Raw payload

    Returns:
        Header followed by the payload
    """
    return _encode_string(MajorType.BYTE_STRING, _bytes_payload(data))


def encode_bytes_into(data: BytesLike, out) -> int:
    """Encode a byte string into a buffer of exactly bytes_size(len(data)) bytes."""
    return encode_string_into(MajorType.BYTE_STRING, _bytes_payload(data), out)


def encode_text(text: str) -> bytes:
    """
    Encode a text string.

    Args:
        text: String to encode; its UTF-8 form is the payload

    Returns:
        Header followed by the UTF-8 payload
    """
    return _encode_string(MajorType.TEXT_STRING, _text_payload(text))


def encode_text_into(text: str, out) -> int:
    """Encode a text string into a buffer sized for its UTF-8 payload."""
    return encode_string_into(MajorType.TEXT_STRING, _text_payload(text), out)


def decode_bytes(
    data: bytes,
    length: Optional[int] = None,
    offset: int = 0,
    strict: bool = False,
) -> Tuple[bytes, int]:
    """
    Decode a byte or text string payload.

    Args:
        data: Bytes containing the encoded string
        length: Expected payload length (None accepts any)
        offset: Starting offset in data
        strict: Reject non-canonical headers

    Returns:
        Tuple of (payload bytes, new offset after the item)

    Raises:
        InvalidMajorType: If the item is not a byte or text string
        InputTooLong: If the length needs a 64-bit header
        LengthMismatch: If the payload length differs from length
        InputTooShort: If data ends inside the header or payload
    """
    _, size, width = decode_header(
        data,
        offset,
        major_types=_STRING_TYPES,
        max_info=AdditionalInfo.UINT32,
        strict=strict,
    )

    if length is not None and size != length:
        raise LengthMismatch(f"Expected {length} payload bytes, header says {size}")

    start = offset + width
    end = start + size
    if end > len(data):
        raise InputTooShort(
            f"String decode: need {size} payload bytes, have {len(data) - start}"
        )

    return bytes(data[start:end]), end


def decode_text(
    data: bytes,
    length: Optional[int] = None,
    offset: int = 0,
    strict: bool = False,
) -> Tuple[str, int]:
    """
    Decode a text string.

    length is the expected UTF-8 payload size in bytes, not characters.

    Returns:
        Tuple of (decoded text, new offset after the item)
    """
    payload, end = decode_bytes(data, length, offset, strict)
    return payload.decode("utf-8", "surrogateescape"), end
