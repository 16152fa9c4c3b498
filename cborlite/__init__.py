# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
cborlite - canonical CBOR codec for integers and strings.

This package encodes and decodes the CBOR (RFC 8949) major types 0-3:
unsigned integers, negative integers, byte strings and text strings.
Encoding is always canonical (shortest header).

Example usage:
    from cborlite import encode_uint, decode_int, encode_text, decode_text

    encode_uint(500)             # b"\\x19\\x01\\xf4"
    decode_int(b"\\x38\\xff")      # (-256, 2)

    data = encode_text("hello")
    text, offset = decode_text(data, length=5)

    # Generic values
    from cborlite import from_python, encode, decode_all
    blob = encode(from_python(b"\\x01\\x02")) + encode(from_python(-7))
    print(decode_all(blob))
"""

from .errors import (
    CBORError,
    DecodeError,
    InputTooShort,
    InvalidMajorType,
    InvalidAdditionalInfo,
    InputTooLong,
    LengthMismatch,
    NonCanonicalHeader,
    IntegerOverflow,
    TrailingData,
)
from .header import (
    MajorType,
    AdditionalInfo,
    UINT64_MAX,
    header_width,
    encode_header,
    encode_header_into,
    decode_header,
)
from .integer import (
    INT64_MIN,
    INT64_MAX,
    uint_size,
    int_size,
    encode_uint,
    encode_uint_into,
    encode_int,
    encode_int_into,
    decode_uint,
    decode_int,
)
from .string import (
    MAX_STRING_LENGTH,
    bytes_size,
    encode_bytes,
    encode_bytes_into,
    encode_text,
    encode_text_into,
    decode_bytes,
    decode_text,
)
from .value import (
    Value,
    UnsignedInt,
    NegativeInt,
    ByteString,
    TextString,
    from_python,
    to_python,
    encoded_size,
    encode,
    encode_into,
    decode,
    decode_one,
    decode_all,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "CBORError",
    "DecodeError",
    "InputTooShort",
    "InvalidMajorType",
    "InvalidAdditionalInfo",
    "InputTooLong",
    "LengthMismatch",
    "NonCanonicalHeader",
    "IntegerOverflow",
    "TrailingData",
    # Header
    "MajorType",
    "AdditionalInfo",
    "UINT64_MAX",
    "header_width",
    "encode_header",
    "encode_header_into",
    "decode_header",
    # Integers
    "INT64_MIN",
    "INT64_MAX",
    "uint_size",
    "int_size",
    "encode_uint",
    "encode_uint_into",
    "encode_int",
    "encode_int_into",
    "decode_uint",
    "decode_int",
    # Strings
    "MAX_STRING_LENGTH",
    "bytes_size",
    "encode_bytes",
    "encode_bytes_into",
    "encode_text",
    "encode_text_into",
    "decode_bytes",
    "decode_text",
    # Values
    "Value",
    "UnsignedInt",
    "NegativeInt",
    "ByteString",
    "TextString",
    "from_python",
    "to_python",
    "encoded_size",
    "encode",
    "encode_into",
    "decode",
    "decode_one",
    "decode_all",
]
