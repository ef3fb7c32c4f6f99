"""
Hash algorithm registry.

Maps each HashAlgorithm to the strategy that computes it.
"""

from __future__ import annotations

from ..core.exceptions import UnknownAlgorithmError
from ..core.models.digest import HashAlgorithm
from .strategies import Blake3Strategy, HashStrategy, MD5Strategy, SHA256Strategy


class HashAlgorithmRegistry:
    """
    Registry for hash algorithm strategies.

    Example:
        registry = HashAlgorithmRegistry()
        strategy = registry.get(HashAlgorithm.BLAKE3)
    """

    def __init__(self, register_defaults: bool = True):
        """
        Initialize the registry.

        Args:
            register_defaults: If True, register MD5, SHA-256 and BLAKE3
        """
        self._strategies: dict[HashAlgorithm, HashStrategy] = {}
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in hash algorithms."""
        self.register(MD5Strategy())
        self.register(SHA256Strategy())
        self.register(Blake3Strategy())

    def register(self, strategy: HashStrategy) -> None:
        """
        Register a hash strategy.

        Args:
            strategy: HashStrategy implementation
        """
        self._strategies[strategy.algorithm] = strategy

    def get(self, algorithm: HashAlgorithm | str) -> HashStrategy:
        """
        Get strategy by algorithm.

        Args:
            algorithm: HashAlgorithm member or its name (e.g., 'blake3')

        Returns:
            The registered HashStrategy

        Raises:
            UnknownAlgorithmError: If the algorithm is not registered
        """
        if isinstance(algorithm, str) and not isinstance(algorithm, HashAlgorithm):
            algorithm = HashAlgorithm.parse(algorithm)
        strategy = self._strategies.get(algorithm)
        if strategy is None:
            raise UnknownAlgorithmError(str(algorithm.value))
        return strategy

    @property
    def available_algorithms(self) -> list[HashAlgorithm]:
        """List registered algorithms."""
        return list(self._strategies.keys())

    def __contains__(self, algorithm: object) -> bool:
        """Check if algorithm is registered."""
        return algorithm in self._strategies
