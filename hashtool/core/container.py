"""
Dependency injection container for hashtool.

A process-wide map from service interface to a dependency-injector
provider. Bootstrap fills it with the logger, presenter, byte source
and algorithm registry; tests replace entries with ``override``.
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Interface-keyed providers for the services a hash run resolves."""

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        """Get the global container instance (singleton)."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the global container (for testing)."""
        cls._instance = None

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Register one shared instance of a service.

        Args:
            interface: The interface type it is resolved by
            implementation: A ready instance
            factory: Builds the instance on first resolve instead
        """
        if implementation is not None:
            self.override(interface, providers.Object(implementation))
        elif factory is not None:
            self.override(interface, providers.Singleton(factory))
        else:
            raise ValueError("Must provide either implementation or factory")

    def override(self, interface: type[T], provider: providers.Provider) -> None:
        """Install ``provider`` for ``interface``, replacing any existing one."""
        self._providers[interface] = provider

    def is_registered(self, interface: type) -> bool:
        return interface in self._providers

    def resolve(self, interface: type[T]) -> T:
        """
        Resolve a service by interface.

        Raises:
            KeyError: If nothing is registered for ``interface``
        """
        if interface not in self._providers:
            raise KeyError(f"No provider registered for: {interface}")
        return self._providers[interface]()


def get_container() -> ServiceContainer:
    """Get the global service container."""
    return ServiceContainer.get_instance()
