"""
Digest models.

Defines the supported algorithms, the run modes, and the report value
produced for every digest the service emits.
"""

from __future__ import annotations

from enum import Enum

from ..exceptions import UnknownAlgorithmError
from .base import ImmutableModel
from .inputs import HashInput


class HashAlgorithm(str, Enum):
    """Supported hash algorithms."""

    MD5 = "md5"
    SHA256 = "sha256"
    BLAKE3 = "blake3"

    @property
    def digest_size(self) -> int:
        """Digest width in bytes."""
        return _DIGEST_SIZES[self]

    @property
    def label(self) -> str:
        """Upper-case tag used in framed output (e.g. 'SHA256')."""
        return self.name

    @classmethod
    def parse(cls, name: str) -> HashAlgorithm:
        """Look up an algorithm by case-insensitive name."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnknownAlgorithmError(name) from None


_DIGEST_SIZES = {
    HashAlgorithm.MD5: 16,
    HashAlgorithm.SHA256: 32,
    HashAlgorithm.BLAKE3: 32,
}


class DigestMode(str, Enum):
    """How inputs are folded into digests."""

    COMPUTE = "COMPUTE"  # one digest per input
    UPDATE = "UPDATE"  # one running digest over all inputs


class DigestReport(ImmutableModel):
    """A digest ready for presentation.

    In incremental mode, ``final`` is False for the running digests
    reported after intermediate inputs.
    """

    entry: HashInput
    algorithm: HashAlgorithm
    mode: DigestMode
    digest: str
    final: bool = True


class DigestOptions(ImmutableModel):
    """Per-run switches for the digest service."""

    algorithm: HashAlgorithm = HashAlgorithm.SHA256
    hex: bool = False
    update: bool = False
    progressive: bool = False

    @property
    def mode(self) -> DigestMode:
        return DigestMode.UPDATE if self.update else DigestMode.COMPUTE
