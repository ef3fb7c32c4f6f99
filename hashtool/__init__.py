"""
hashtool - print string or file checksums.

Computes MD5, SHA-256 or BLAKE3 digests over texts and files, one
digest per input or a single digest over all of them.
"""

from .core.models.digest import HashAlgorithm
from .hashing.engine import DigestState, digest_oneshot
from .hashing.hexcodec import decode_hex_literals

__all__ = [
    "DigestState",
    "HashAlgorithm",
    "decode_hex_literals",
    "digest_oneshot",
]
