#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Encode and inspect CBOR items from the command line.

Usage:
    python cbor_tool.py encode uint 500
    python cbor_tool.py encode int -256
    python cbor_tool.py encode bytes "01 02 03"
    python cbor_tool.py encode text hello
    python cbor_tool.py decode "19 01 f4 38 ff" --strict
"""

import argparse
import sys

from cborlite import (
    DecodeError,
    ByteString,
    NegativeInt,
    TextString,
    UnsignedInt,
    decode,
    encode_bytes,
    encode_int,
    encode_text,
    encode_uint,
)

_KIND_NAMES = {
    UnsignedInt: "uint",
    NegativeInt: "nint",
    ByteString: "bytes",
    TextString: "text",
}


def cmd_encode(kind: str, value: str) -> bytes:
    """Encode a single value given on the command line."""
    if kind == "uint":
        encoded = encode_uint(int(value, 0))
    elif kind == "int":
        encoded = encode_int(int(value, 0))
    elif kind == "bytes":
        encoded = encode_bytes(bytes.fromhex(value))
    else:
        encoded = encode_text(value)

    print(encoded.hex(" "))
    return encoded


def cmd_decode(hex_data: str, strict: bool) -> int:
    """Decode every item in a hex string; return the item count."""
    data = bytes.fromhex(hex_data)
    if not data:
        print("Error: No input bytes")
        return 0

    offset = 0
    count = 0
    while offset < len(data):
        value, end = decode(data, offset, strict=strict)
        item = data[offset:end]
        print(f"{offset:6d}: {_KIND_NAMES[type(value)]:<5} {value.value!r}")
        print(f"        [{item[:16].hex(' ')}{' ...' if len(item) > 16 else ''}]")
        offset = end
        count += 1

    print(f"{count} item(s), {len(data)} bytes")
    return count


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Encode and inspect canonical CBOR integers and strings"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Encode one value")
    encode_parser.add_argument("kind", choices=["uint", "int", "bytes", "text"],
                               help="Value kind")
    encode_parser.add_argument("value",
                               help="Value (integers accept 0x prefix, bytes are hex)")

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode hex-encoded items")
    decode_parser.add_argument("data", help="Hex string, spaces allowed")
    decode_parser.add_argument("--strict", "-s", action="store_true",
                               help="Reject non-canonical headers")

    args = parser.parse_args(argv)

    try:
        if args.command == "encode":
            cmd_encode(args.kind, args.value)
        elif args.command == "decode":
            if not cmd_decode(args.data, args.strict):
                sys.exit(1)
    except DecodeError as e:
        print(f"Error: {type(e).__name__}: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
