"""
Hex-literal codec.

Hex mode inputs are written as byte literals such as
``0x19 0xab, 0xCD 0xef``: tokens separated by whitespace and/or commas,
each exactly four characters long. Decoding is strict and all-or-nothing.
"""

from __future__ import annotations

import re

from ..core.exceptions import InvalidHexCharacter, InvalidHexLength, InvalidHexPrefix

# Whitespace minus the \x1c-\x1f separators, which Unicode does not count as
# white space.
_SEPARATORS = re.compile(r"(?:[^\S\x1c-\x1f]|,)+")
_HEX_DIGITS = "0123456789abcdefABCDEF"


def _nibble(char: str, token: str) -> int:
    if char not in _HEX_DIGITS:
        raise InvalidHexCharacter(token, char)
    return int(char, 16)


def decode_hex_token(token: str) -> int:
    """
    Decode a single ``0xNN`` token into a byte value.

    Raises:
        InvalidHexLength: Token is not exactly 4 characters
        InvalidHexPrefix: Token does not start with 0x or 0X
        InvalidHexCharacter: A digit after the prefix is not hexadecimal
    """
    if len(token) != 4:
        raise InvalidHexLength(token)
    if not token.startswith(("0x", "0X")):
        raise InvalidHexPrefix(token)
    hi = _nibble(token[2], token)
    lo = _nibble(token[3], token)
    return hi * 16 + lo


def iter_hex_tokens(text: str) -> list[str]:
    """Split hex-literal text into its non-empty tokens."""
    return [token for token in _SEPARATORS.split(text) if token]


def decode_hex_literals(text: str) -> bytes:
    """
    Decode a hex-literal string into bytes.

    Args:
        text: Tokens like ``0x12`` separated by whitespace or commas

    Returns:
        Decoded bytes (empty for blank input)

    Raises:
        HexDecodeError: On the first malformed token; no partial result
    """
    return bytes(decode_hex_token(token) for token in iter_hex_tokens(text))


def encode_hex_literals(data: bytes, sep: str = " ") -> str:
    """Render bytes as ``0xNN`` tokens, the inverse of decode_hex_literals."""
    return sep.join(f"0x{b:02x}" for b in data)


def to_hex(data: bytes) -> str:
    """Render digest bytes as lowercase hex, two characters per byte."""
    return data.hex()
