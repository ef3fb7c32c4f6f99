"""
Application bootstrap for hashtool.

Registers the services a run needs in the DI container, configured
from the loaded settings. Services already registered (for example by
a test) are left in place.
"""

from pathlib import Path

from ..hashing.registry import HashAlgorithmRegistry
from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .interfaces.presenter import IPresenter
from .interfaces.sources import IByteSource
from .models.config import HashToolConfig

_initialized = False


def bootstrap(
    config: HashToolConfig | None = None,
    verbose: bool = False,
    base_dir: Path | None = None,
) -> ServiceContainer:
    """
    Bootstrap the hashtool application.

    Args:
        config: Loaded configuration (defaults when None)
        verbose: Force debug logging to stderr
        base_dir: Directory relative file inputs are resolved against

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    _register_core_services(container, config or HashToolConfig(), verbose, base_dir)

    _initialized = True
    return container


def _register_core_services(
    container: ServiceContainer,
    config: HashToolConfig,
    verbose: bool,
    base_dir: Path | None,
) -> None:
    """Register core application services."""
    from ..inputs.sources import FileByteSource
    from ..presenters.console import ConsolePresenter
    from ..services.logging import HashToolLogger

    if not container.is_registered(IPresenter):
        container.register_singleton(
            IPresenter,  # type: ignore[type-abstract]
            implementation=ConsolePresenter(
                use_color=config.output.color,
                preview_width=config.output.preview_width,
            ),
        )

    if not container.is_registered(ILogger):

        def create_logger() -> ILogger:
            return HashToolLogger(
                level="debug" if verbose else config.logging.level,
                console_enabled=verbose or config.logging.console,
                file_enabled=config.logging.file,
            )

        container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]

    if not container.is_registered(IByteSource):
        container.register_singleton(
            IByteSource,  # type: ignore[type-abstract]
            factory=lambda: FileByteSource(base_dir),
        )

    if not container.is_registered(HashAlgorithmRegistry):
        container.register_singleton(HashAlgorithmRegistry, factory=HashAlgorithmRegistry)


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False
