"""
Hash algorithm strategy implementations.

Each strategy encapsulates the construction of a hasher for one
algorithm, so the engine can treat MD5, SHA-256 and BLAKE3 uniformly.
"""

import hashlib
from abc import ABC, abstractmethod
from typing import Any

import blake3

from ..core.models.digest import HashAlgorithm


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm: The HashAlgorithm this strategy computes
    - create_hasher(): Factory method for hasher instances
    """

    @property
    @abstractmethod
    def algorithm(self) -> HashAlgorithm:
        """Return the algorithm this strategy implements."""
        pass

    @abstractmethod
    def create_hasher(self) -> Any:
        """Create a new hasher instance."""
        pass

    def update(self, hasher: Any, data: bytes) -> None:
        """Update hasher with data. Default implementation works for most hashers."""
        hasher.update(data)

    def digest(self, hasher: Any) -> bytes:
        """Get the raw digest without consuming the hasher."""
        return hasher.digest()

    def copy(self, hasher: Any) -> Any:
        """Clone a hasher so a digest can be taken mid-stream."""
        return hasher.copy()


class MD5Strategy(HashStrategy):
    """MD5 hashing strategy - 16-byte digest, legacy compatibility only."""

    @property
    def algorithm(self) -> HashAlgorithm:
        return HashAlgorithm.MD5

    def create_hasher(self) -> Any:
        return hashlib.md5()


class SHA256Strategy(HashStrategy):
    """SHA-256 hashing strategy - widely compatible."""

    @property
    def algorithm(self) -> HashAlgorithm:
        return HashAlgorithm.SHA256

    def create_hasher(self) -> Any:
        return hashlib.sha256()


class Blake3Strategy(HashStrategy):
    """BLAKE3 hashing strategy - default 32-byte output, no XOF."""

    @property
    def algorithm(self) -> HashAlgorithm:
        return HashAlgorithm.BLAKE3

    def create_hasher(self) -> Any:
        return blake3.blake3()
