"""
Hashing core: algorithm strategies, the digest engine and the
hex-literal codec.
"""

from .engine import DigestState, digest_bytes, digest_oneshot
from .hexcodec import (
    decode_hex_literals,
    decode_hex_token,
    encode_hex_literals,
    iter_hex_tokens,
    to_hex,
)
from .registry import HashAlgorithmRegistry
from .strategies import Blake3Strategy, HashStrategy, MD5Strategy, SHA256Strategy

__all__ = [
    "Blake3Strategy",
    "DigestState",
    "HashAlgorithmRegistry",
    "HashStrategy",
    "MD5Strategy",
    "SHA256Strategy",
    "decode_hex_literals",
    "decode_hex_token",
    "digest_bytes",
    "digest_oneshot",
    "encode_hex_literals",
    "iter_hex_tokens",
    "to_hex",
]
