"""
Digest engine.

Two ways to digest inputs:

- ``digest_oneshot`` hashes one byte sequence with a fresh hasher.
- ``DigestState`` folds many byte sequences into a single running
  hash; ``finalize`` yields the digest of the whole concatenated stream
  and retires the state.

Both render digests as lowercase hex.
"""

from __future__ import annotations

from typing import Any

from ..core.exceptions import DigestStateError
from ..core.models.digest import HashAlgorithm
from .hexcodec import to_hex
from .registry import HashAlgorithmRegistry

_default_registry: HashAlgorithmRegistry | None = None


def _get_registry(registry: HashAlgorithmRegistry | None) -> HashAlgorithmRegistry:
    global _default_registry
    if registry is not None:
        return registry
    if _default_registry is None:
        _default_registry = HashAlgorithmRegistry()
    return _default_registry


def digest_bytes(
    data: bytes,
    algorithm: HashAlgorithm,
    registry: HashAlgorithmRegistry | None = None,
) -> bytes:
    """Compute the raw digest of ``data``."""
    strategy = _get_registry(registry).get(algorithm)
    hasher = strategy.create_hasher()
    strategy.update(hasher, data)
    return strategy.digest(hasher)


def digest_oneshot(
    data: bytes,
    algorithm: HashAlgorithm,
    registry: HashAlgorithmRegistry | None = None,
) -> str:
    """
    Hash a single byte sequence independently of any other input.

    Args:
        data: Bytes to hash
        algorithm: Algorithm to use
        registry: Strategy registry (defaults to the built-in algorithms)

    Returns:
        Lowercase hex digest
    """
    return to_hex(digest_bytes(data, algorithm, registry))


class DigestState:
    """
    Running hash over a stream of inputs.

    Created empty, fed with ``update`` in input order, and consumed once
    by ``finalize``. The algorithm is fixed for the lifetime of the state.

    Example:
        state = DigestState(HashAlgorithm.SHA256)
        state.update(b"ab")
        state.update(b"c")
        state.finalize() == digest_oneshot(b"abc", HashAlgorithm.SHA256)
    """

    def __init__(
        self,
        algorithm: HashAlgorithm,
        registry: HashAlgorithmRegistry | None = None,
    ) -> None:
        self._algorithm = algorithm
        self._strategy = _get_registry(registry).get(algorithm)
        self._hasher: Any = self._strategy.create_hasher()
        self._bytes_seen = 0
        self._finalized = False

    @property
    def algorithm(self) -> HashAlgorithm:
        return self._algorithm

    @property
    def bytes_seen(self) -> int:
        """Total number of bytes folded into the state so far."""
        return self._bytes_seen

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _check_open(self, operation: str) -> None:
        if self._finalized:
            raise DigestStateError(
                f"Cannot {operation} a digest state that was already finalized",
                context={"algorithm": self._algorithm.value},
            )

    def update(self, data: bytes) -> None:
        """Append ``data`` to the stream."""
        self._check_open("update")
        self._strategy.update(self._hasher, data)
        self._bytes_seen += len(data)

    def peek(self) -> str:
        """Digest of the stream so far, leaving the state open."""
        self._check_open("peek at")
        snapshot = self._strategy.copy(self._hasher)
        return to_hex(self._strategy.digest(snapshot))

    def finalize(self) -> str:
        """Digest of the whole stream. The state cannot be used afterwards."""
        self._check_open("finalize")
        self._finalized = True
        digest = self._strategy.digest(self._hasher)
        self._hasher = None
        return to_hex(digest)
