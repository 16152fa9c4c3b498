# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Exceptions raised by the cborlite codec.

Decoding problems are reported as subclasses of DecodeError, which is
also a ValueError. Encoder misuse (unsupported major type, value out of
range, wrongly sized output buffer) raises plain ValueError/TypeError.
"""


class CBORError(Exception):
    """Base exception for cborlite errors."""
    pass


class DecodeError(CBORError, ValueError):
    """Input could not be decoded."""
    pass


class InputTooShort(DecodeError):
    """Fewer bytes available than the header requires."""
    pass


class InvalidMajorType(DecodeError):
    """Major type is not the one being decoded, or not supported at all."""
    pass


class InvalidAdditionalInfo(DecodeError):
    """Additional info is one of the reserved values 28-31."""
    pass


class InputTooLong(DecodeError):
    """String length does not fit in 32 bits."""
    pass


class LengthMismatch(DecodeError):
    """Decoded string length differs from the expected length."""
    pass


class NonCanonicalHeader(DecodeError):
    """Header is longer than needed for its magnitude (strict mode)."""
    pass


class IntegerOverflow(DecodeError):
    """Decoded integer does not fit in the requested range."""
    pass


class TrailingData(DecodeError):
    """Bytes left over after a single item was decoded."""
    pass
